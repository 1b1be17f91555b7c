"""
Facial feature parameter types.

The twelve facial features are always handled in one canonical order. That
order decides both which sinusoid drives each feature and the byte layout of
reference strings, so reordering PARAM_ORDER is a breaking format change.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from faceindex.core.exceptions import ParameterRangeError

PARAM_ORDER: Tuple[str, ...] = (
    'eyebrow_curve',
    'eyebrow_peak_offset',
    'eyebrow_width',
    'eye_y_offset',
    'eye_x_offset',
    'upper_lip_curve',
    'lower_lip_curve',
    'cupid_bow_offset',
    'nose_width',
    'cupid_bow_strength',
    'mouth_width',
    'eyebrow_stroke_width',
)

PARAM_COUNT = len(PARAM_ORDER)


@dataclass(frozen=True)
class _FaceVector:
    """Twelve named scalars, one per facial feature, in canonical order."""
    eyebrow_curve: float = 0.0
    eyebrow_peak_offset: float = 0.0
    eyebrow_width: float = 0.0
    eye_y_offset: float = 0.0
    eye_x_offset: float = 0.0
    upper_lip_curve: float = 0.0
    lower_lip_curve: float = 0.0
    cupid_bow_offset: float = 0.0
    nose_width: float = 0.0
    cupid_bow_strength: float = 0.0
    mouth_width: float = 0.0
    eyebrow_stroke_width: float = 0.0

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """
        Build a vector from values listed in canonical order.

        Args:
            values: Exactly PARAM_COUNT numbers (list, tuple or numpy array)

        Returns:
            New vector instance
        """
        if len(values) != PARAM_COUNT:
            raise ValueError(f"Expected {PARAM_COUNT} values, got {len(values)}")
        return cls(**{name: float(value) for name, value in zip(PARAM_ORDER, values)})

    @classmethod
    def from_dict(cls, values: Mapping[str, float]):
        """Build a vector from a name mapping; absent features default to 0."""
        return cls(**{name: float(values.get(name, 0.0)) for name in PARAM_ORDER})

    def to_array(self) -> NDArray[np.float64]:
        """Values as a float64 array in canonical order."""
        return np.array([getattr(self, name) for name in PARAM_ORDER], dtype=np.float64)

    def as_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {name: getattr(self, name) for name in PARAM_ORDER}

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in PARAM_ORDER)


@dataclass(frozen=True)
class ParameterVector(_FaceVector):
    """
    Synthesized facial parameters.

    Every field is an amplitude in [-1, 1]; the geometry mapper rescales
    each one into its own physical range.
    """

    def __post_init__(self):
        for name in PARAM_ORDER:
            value = getattr(self, name)
            if not math.isfinite(value) or not -1.0 <= value <= 1.0:
                raise ParameterRangeError(f"{name} must lie in [-1, 1], got {value}")


@dataclass(frozen=True)
class Seed(_FaceVector):
    """
    Starting point of a face walk.

    Fields are phase offsets in radians added to each feature's sinusoid,
    so they are not bounded the way ParameterVector fields are.
    """


DEFAULT_SEED = Seed()


@dataclass(frozen=True)
class FaceDimensions:
    """Anchor point for all derived face geometry."""
    center_x: float
    center_y: float
