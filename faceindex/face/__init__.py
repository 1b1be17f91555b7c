"""
Deterministic face synthesis.

Includes:
- Parameter synthesis from a face index and seed
- Reference string encoding/decoding for seeds
- Geometry mapping from parameters to feature curves
- Face generation pipeline for galleries
"""

from faceindex.face.parameters import (
    PARAM_ORDER,
    PARAM_COUNT,
    DEFAULT_SEED,
    ParameterVector,
    Seed,
    FaceDimensions,
)
from faceindex.face.synthesizer import BASE_FREQ, FREQUENCY_MULTIPLIERS, synthesize, synthesize_walk
from faceindex.face.reference import REFERENCE_LENGTH, encode, decode, validate
from faceindex.face.geometry import FeatureGeometry, map_geometry, scale_parameters
from faceindex.face.generator import Face, generate_face, walk_faces, seed_from_parameters

__all__ = [
    'PARAM_ORDER',
    'PARAM_COUNT',
    'DEFAULT_SEED',
    'ParameterVector',
    'Seed',
    'FaceDimensions',
    'BASE_FREQ',
    'FREQUENCY_MULTIPLIERS',
    'synthesize',
    'synthesize_walk',
    'REFERENCE_LENGTH',
    'encode',
    'decode',
    'validate',
    'FeatureGeometry',
    'map_geometry',
    'scale_parameters',
    'Face',
    'generate_face',
    'walk_faces',
    'seed_from_parameters',
]
