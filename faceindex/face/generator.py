"""
Face generation pipeline.

Ties the reference codec, parameter synthesizer and geometry mapper together
the way a gallery uses them: pick an index, optionally a reference, and get
back everything needed to draw and bookmark the face.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

import numpy as np

from faceindex.core.config import settings
from faceindex.core.exceptions import InvalidReferenceError, WalkLengthError
from faceindex.core.logging import get_logger
from faceindex.face.geometry import FeatureGeometry, map_geometry
from faceindex.face.parameters import DEFAULT_SEED, FaceDimensions, ParameterVector, Seed
from faceindex.face.reference import decode, encode, validate
from faceindex.face.synthesizer import synthesize, synthesize_walk

logger = get_logger(__name__)


@dataclass(frozen=True)
class Face:
    """
    One generated face.

    Attributes:
        index: Position along the walk
        seed: Phase offsets the walk started from
        reference: Canonical (lowercase) reference of the seed
        parameters: Synthesized parameters
        geometry: Derived feature geometry
    """
    index: int
    seed: Seed
    reference: str
    parameters: ParameterVector
    geometry: FeatureGeometry

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'index': self.index,
            'reference': self.reference,
            'seed': self.seed.as_dict(),
            'parameters': self.parameters.as_dict(),
            'geometry': self.geometry.to_dict(),
        }


def default_dimensions() -> FaceDimensions:
    """Face center configured for the canvas."""
    return FaceDimensions(center_x=settings.face_center_x, center_y=settings.face_center_y)


def resolve_seed(reference: Optional[str]) -> Seed:
    """
    Turn an optional reference into a seed.

    Args:
        reference: Hex reference, or None for the default seed

    Returns:
        Decoded seed

    Raises:
        InvalidReferenceError: If the reference is not 24 hex characters
    """
    if reference is None:
        return DEFAULT_SEED
    if not validate(reference):
        logger.warning("invalid_reference_rejected", reference=reference)
        raise InvalidReferenceError(
            f"Reference must be 24 hexadecimal characters, got {reference!r}"
        )
    return decode(reference)


def seed_from_parameters(params: ParameterVector) -> Seed:
    """Seed whose face at index 0 has the given parameters."""
    return Seed.from_array(np.arcsin(params.to_array()))


def generate_face(
    index: int,
    reference: Optional[str] = None,
    dimensions: Optional[FaceDimensions] = None
) -> Face:
    """
    Generate a single face.

    Args:
        index: Face index
        reference: Optional seed reference (default seed when omitted)
        dimensions: Face center (configured default when omitted)

    Returns:
        Generated face
    """
    seed = resolve_seed(reference)
    dimensions = dimensions or default_dimensions()

    parameters = synthesize(index, seed)
    geometry = map_geometry(dimensions, parameters)
    face = Face(
        index=index,
        seed=seed,
        reference=encode(seed),
        parameters=parameters,
        geometry=geometry
    )

    logger.debug("face_generated", index=index, reference=face.reference)

    return face


def _build_face(
    index: int,
    seed: Seed,
    reference: str,
    parameters: ParameterVector,
    dimensions: FaceDimensions
) -> Face:
    return Face(
        index=index,
        seed=seed,
        reference=reference,
        parameters=parameters,
        geometry=map_geometry(dimensions, parameters)
    )


def walk_faces(
    start: int,
    count: int,
    reference: Optional[str] = None,
    dimensions: Optional[FaceDimensions] = None,
    step: int = 1
) -> Iterator[Face]:
    """
    Generate successive faces along the index walk.

    Arguments are checked when this is called; faces are built lazily
    as the returned iterator is consumed.

    Args:
        start: First face index
        count: Number of faces
        reference: Optional seed reference
        dimensions: Face center
        step: Index increment between faces

    Returns:
        Iterator over faces for start, start + step, ...

    Raises:
        WalkLengthError: If count is negative or above the configured limit
        InvalidReferenceError: If the reference is not 24 hex characters
    """
    if count < 0 or count > settings.walk_max_length:
        raise WalkLengthError(
            f"Walk length must be between 0 and {settings.walk_max_length}, got {count}"
        )

    seed = resolve_seed(reference)
    dimensions = dimensions or default_dimensions()
    seed_reference = encode(seed)
    indices = [start + i * step for i in range(count)]

    logger.info("face_walk_started", start=start, count=count, step=step, reference=seed_reference)

    return (
        _build_face(index, seed, seed_reference, ParameterVector.from_array(row), dimensions)
        for index, row in zip(indices, synthesize_walk(indices, seed))
    )
