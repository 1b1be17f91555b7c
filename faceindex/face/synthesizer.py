"""
Parameter synthesis.

Each facial feature follows its own sinusoid over the face index:

    p(index) = sin(k * ω * index + seed)

with a shared base frequency ω = 2π / 100 and a distinct integer multiplier
k per feature, so adjacent indices never move every feature in lockstep.
"""

import math
from types import MappingProxyType
from typing import Iterable, Mapping

import numpy as np
from numpy.typing import NDArray

from faceindex.face.parameters import PARAM_ORDER, ParameterVector, Seed

BASE_FREQ = 2 * math.pi / 100

# Existing reference strings depend on these exact values
FREQUENCY_MULTIPLIERS: Mapping[str, int] = MappingProxyType({
    'eye_y_offset': 1,
    'eye_x_offset': 2,
    'upper_lip_curve': 3,
    'lower_lip_curve': 5,
    'eyebrow_curve': 7,
    'nose_width': 11,
    'eyebrow_peak_offset': 13,
    'eyebrow_width': 17,
    'cupid_bow_offset': 19,
    'cupid_bow_strength': 23,
    'mouth_width': 29,
    'eyebrow_stroke_width': 31,
})

_MULTIPLIERS = np.array([FREQUENCY_MULTIPLIERS[name] for name in PARAM_ORDER], dtype=np.float64)
_MULTIPLIERS.setflags(write=False)


def angular_frequencies() -> NDArray[np.float64]:
    """Per-feature angular frequency k * ω in canonical order."""
    return _MULTIPLIERS * BASE_FREQ


def synthesize(index: int, seed: Seed) -> ParameterVector:
    """
    Compute the facial parameters of one face.

    Args:
        index: Face index (any integer; sine periodicity handles wrap-around)
        seed: Phase offsets in radians

    Returns:
        Parameter vector with every field in [-1, 1]
    """
    values = np.sin(angular_frequencies() * index + seed.to_array())
    return ParameterVector.from_array(values)


def synthesize_walk(indices: Iterable[int], seed: Seed) -> NDArray[np.float64]:
    """
    Compute facial parameters for many indices at once.

    Args:
        indices: Face indices
        seed: Phase offsets in radians

    Returns:
        Array of shape (len(indices), 12); row i holds the parameters of
        indices[i] in canonical order
    """
    t = np.asarray(list(indices), dtype=np.float64)
    phases = angular_frequencies()[np.newaxis, :] * t[:, np.newaxis] + seed.to_array()
    return np.sin(phases)
