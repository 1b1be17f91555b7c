"""
Reference string codec.

A reference is 24 hex digits: one byte per feature in canonical order. Each
byte stores the amplitude sin(phase) of a seed field, mapped from [-1, 1]
onto [0, 255]. Decoding recovers the phase with asin, so only the principal
branch [-π/2, π/2] survives a decode. encode(decode(r)) == r always holds
for lowercase r; decode(encode(seed)) == seed only holds for seeds already
on that branch.
"""

import math
import re
from typing import List, Optional

import numpy as np

from faceindex.face.parameters import DEFAULT_SEED, PARAM_COUNT, PARAM_ORDER, Seed

REFERENCE_LENGTH = 2 * PARAM_COUNT

_REFERENCE_PATTERN = re.compile(r'[0-9A-Fa-f]{%d}' % REFERENCE_LENGTH)
_HEX_PAIR = re.compile(r'[0-9A-Fa-f]{2}')


def _amplitude_to_byte(amplitude: float) -> int:
    # Half-up rounding, matching references produced by other implementations
    byte = math.floor((amplitude + 1) * 256 / 2 + 0.5)
    return max(0, min(255, byte))


def _byte_to_amplitude(byte: int) -> float:
    amplitude = (byte * 2 / 256) - 1
    return max(-1.0, min(1.0, amplitude))


def encode(seed: Seed) -> str:
    """
    Encode a seed as a 24-character lowercase hex reference.

    Args:
        seed: Phase offsets in radians

    Returns:
        Reference string
    """
    amplitudes = np.sin(seed.to_array())
    return ''.join(f"{_amplitude_to_byte(float(a)):02x}" for a in amplitudes)


def _split_bytes(reference: str) -> List[Optional[int]]:
    # None marks a group that is not two hex digits
    groups = [reference[i:i + 2] for i in range(0, len(reference) - 1, 2)]
    return [int(group, 16) if _HEX_PAIR.fullmatch(group) else None for group in groups]


def decode(reference: str) -> Seed:
    """
    Decode a reference string into a seed.

    Never raises. Only the first 24 characters matter. A trailing odd
    character is ignored, and features without a usable byte (missing or
    not hexadecimal) keep the default phase of 0. Call validate() first to
    reject malformed references.

    Args:
        reference: Hex reference, ideally one that passes validate()

    Returns:
        Seed with every phase in [-π/2, π/2]
    """
    byte_values = _split_bytes(reference[:REFERENCE_LENGTH])
    phases = DEFAULT_SEED.as_dict()
    for name, byte in zip(PARAM_ORDER, byte_values):
        if byte is None:
            continue
        phases[name] = float(np.arcsin(_byte_to_amplitude(byte)))
    return Seed.from_dict(phases)


def validate(reference) -> bool:
    """Check that a value is exactly 24 hexadecimal characters."""
    if not isinstance(reference, str):
        return False
    return _REFERENCE_PATTERN.fullmatch(reference) is not None
