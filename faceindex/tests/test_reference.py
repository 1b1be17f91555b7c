"""
Tests for the reference string codec.
"""

import math

import pytest
import numpy as np

from faceindex.face.parameters import DEFAULT_SEED, PARAM_COUNT, Seed
from faceindex.face.reference import REFERENCE_LENGTH, encode, decode, validate

NEUTRAL_REFERENCE = '80' * PARAM_COUNT


def _reference(first_byte: int) -> str:
    return ''.join(f"{(first_byte + 37 * i) % 256:02x}" for i in range(PARAM_COUNT))


class TestEncode:
    """Test seed encoding."""

    def test_default_seed(self):
        """Test the default seed encodes to twelve 0x80 bytes."""
        assert encode(DEFAULT_SEED) == NEUTRAL_REFERENCE

    def test_length_and_case(self):
        """Test encoded references are 24 lowercase hex digits."""
        seed = Seed.from_array(np.linspace(-3.0, 3.0, PARAM_COUNT))
        reference = encode(seed)

        assert len(reference) == REFERENCE_LENGTH == 24
        assert reference == reference.lower()
        assert validate(reference)

    def test_extremes_clamped(self):
        """Test full amplitudes land on the byte range limits."""
        seed = Seed(eyebrow_curve=math.pi / 2, eyebrow_peak_offset=-math.pi / 2)
        reference = encode(seed)

        assert reference[:2] == 'ff'
        assert reference[2:4] == '00'

    def test_uses_sine_of_phase(self):
        """Test phases one full turn apart encode identically."""
        seed = Seed(nose_width=0.3)
        shifted = Seed(nose_width=0.3 + 2 * math.pi)
        assert encode(seed) == encode(shifted)

    def test_deterministic(self):
        """Test identical seeds give identical references."""
        seed = Seed(mouth_width=2.0)
        assert encode(seed) == encode(Seed(mouth_width=2.0))


class TestDecode:
    """Test reference decoding."""

    def test_neutral_reference(self):
        """Test the neutral reference decodes to the default seed exactly."""
        assert decode(NEUTRAL_REFERENCE) == DEFAULT_SEED

    def test_byte_range_limits(self):
        """Test the lowest and highest bytes."""
        seed = decode('00ff' + '80' * 10)

        assert seed.eyebrow_curve == pytest.approx(-math.pi / 2)
        assert seed.eyebrow_peak_offset == pytest.approx(math.asin(255 * 2 / 256 - 1))
        assert seed.eyebrow_width == 0.0

    def test_phases_on_principal_branch(self):
        """Test decoded phases stay within [-π/2, π/2]."""
        for first_byte in range(0, 256, 5):
            values = decode(_reference(first_byte)).to_array()
            assert np.all(np.abs(values) <= math.pi / 2)

    def test_case_insensitive(self):
        """Test upper and lower case references decode identically."""
        reference = _reference(171)
        assert decode(reference.upper()) == decode(reference)

    def test_short_reference_keeps_defaults(self):
        """Test missing trailing bytes leave phases at zero."""
        seed = decode('ff00')

        assert seed.eyebrow_curve > 0
        assert seed.eyebrow_peak_offset == pytest.approx(-math.pi / 2)
        assert list(seed)[2:] == [0.0] * (PARAM_COUNT - 2)

    def test_odd_trailing_character_ignored(self):
        """Test an incomplete trailing group is discarded."""
        assert decode('ff0') == decode('ff')

    def test_empty_reference(self):
        """Test an empty reference gives the default seed."""
        assert decode('') == DEFAULT_SEED

    def test_long_reference_truncated(self):
        """Test only the first 24 characters are used."""
        reference = _reference(9)
        assert decode(reference + 'ffff') == decode(reference)
        assert decode(reference + 'zz') == decode(reference)

    def test_non_hex_group_keeps_default(self):
        """Test a non-hexadecimal group decodes without raising and keeps phase 0."""
        seed = decode('ffg0' + 'ff' * 10)
        values = seed.to_array()

        assert np.all(np.isfinite(values))
        assert seed.eyebrow_peak_offset == 0.0
        assert seed.eyebrow_curve == pytest.approx(math.asin(255 * 2 / 256 - 1))
        assert seed.eyebrow_stroke_width == seed.eyebrow_curve

    @pytest.mark.parametrize('reference', [
        '+f' + '80' * 11,
        ' f' + '80' * 11,
        'zz' * 12,
        '8\n' + '80' * 11,
    ])
    def test_malformed_groups_decode_to_finite_phases(self, reference):
        """Test groups that are not two hex digits never produce NaN."""
        seed = decode(reference)

        assert np.all(np.isfinite(seed.to_array()))
        assert seed.eyebrow_curve == 0.0


class TestRoundTrip:
    """Test codec round-trip laws."""

    def test_encode_of_decode_is_identity(self):
        """Test every byte value in every position survives decode then encode."""
        for first_byte in range(256):
            reference = _reference(first_byte)
            assert encode(decode(reference)) == reference

    def test_encode_of_decode_normalizes_case(self):
        """Test uppercase references re-encode in lowercase."""
        reference = _reference(200)
        assert encode(decode(reference.upper())) == reference

    def test_decode_of_encode_is_lossy(self):
        """Test phases off the principal branch are not recovered."""
        seed = Seed(eyebrow_curve=3.0)
        recovered = decode(encode(seed))

        assert recovered.eyebrow_curve != seed.eyebrow_curve
        assert abs(recovered.eyebrow_curve) <= math.pi / 2
        # Amplitude survives up to byte quantization
        assert math.sin(recovered.eyebrow_curve) == pytest.approx(math.sin(3.0), abs=1 / 128)

    def test_end_to_end_default(self):
        """Test default seed encodes and decodes back exactly."""
        assert decode(encode(DEFAULT_SEED)) == DEFAULT_SEED


class TestValidate:
    """Test reference validation."""

    @pytest.mark.parametrize('reference', [
        '0' * 24,
        NEUTRAL_REFERENCE,
        'ABCDEF0123456789abcdef01',
    ])
    def test_accepts(self, reference):
        """Test well-formed references pass."""
        assert validate(reference) is True

    @pytest.mark.parametrize('reference', [
        '0' * 23,
        '0' * 25,
        '',
        'g' + '0' * 23,
        '0' * 23 + '\n',
        ' ' + '0' * 23,
    ])
    def test_rejects(self, reference):
        """Test malformed references fail."""
        assert validate(reference) is False

    @pytest.mark.parametrize('value', [None, 808080, b'808080808080808080808080'])
    def test_non_string_rejected(self, value):
        """Test non-string input returns False instead of raising."""
        assert validate(value) is False
