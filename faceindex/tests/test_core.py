"""
Tests for settings, logging and the exception hierarchy.
"""

import pytest

from faceindex.core.config import Settings, get_settings, settings
from faceindex.core.exceptions import (
    FaceIndexError,
    InvalidReferenceError,
    ParameterRangeError,
    WalkLengthError,
)
from faceindex.core.logging import get_logger


class TestSettings:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ('APP_NAME', 'FACE_CENTER_X', 'FACE_CENTER_Y', 'WALK_MAX_LENGTH', 'LOG_FORMAT'):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)

        assert config.app_name == 'face-index'
        assert config.face_center_x == 200.0
        assert config.face_center_y == 200.0
        assert config.walk_max_length == 1000
        assert config.log_format == 'json'

    def test_environment_override(self, monkeypatch):
        """Test settings read from environment variables."""
        monkeypatch.setenv('FACE_CENTER_X', '320')
        monkeypatch.setenv('WALK_MAX_LENGTH', '50')
        config = Settings(_env_file=None)

        assert config.face_center_x == 320.0
        assert config.walk_max_length == 50

    def test_get_settings(self):
        """Test the shared settings instance."""
        assert get_settings() is settings

    def test_unused_fields_absent(self, monkeypatch):
        """Test settings expose only what the generator reads."""
        monkeypatch.setenv('DEBUG', 'false')
        config = Settings(_env_file=None)

        assert not hasattr(config, 'debug')
        assert not hasattr(config, 'app_version')


class TestExceptions:
    """Test error codes."""

    @pytest.mark.parametrize('error_class, code', [
        (InvalidReferenceError, 'INVALID_REFERENCE'),
        (ParameterRangeError, 'PARAMETER_RANGE'),
        (WalkLengthError, 'WALK_LENGTH'),
    ])
    def test_codes(self, error_class, code):
        """Test each error carries its code and message."""
        error = error_class('bad input')

        assert isinstance(error, FaceIndexError)
        assert error.code == code
        assert error.message == 'bad input'
        assert str(error) == 'bad input'

    def test_base_code(self):
        """Test base error default code."""
        assert FaceIndexError('oops').code == 'FACE_INDEX_ERROR'


class TestLogging:
    """Test logger creation."""

    def test_get_logger(self):
        """Test loggers accept structured events."""
        logger = get_logger('faceindex.tests')
        logger.debug('test_event', index=1)
