"""Packing of address text into a 64-bit integer and back.

Bit layout (bit 0 is least significant):

    63        unused, always 0
    62 - 58   depth, 0..26
    57 - 52   reserved, always 0
    51 - 0    2 bits per level; level 1 in bits 1-0, level 26 in bits 51-50

Sector codes are 00 = A, 01 = B, 10 = C and 11 = D.
"""

from __future__ import annotations

import operator

from quadtree_address.address.validation import require_valid
from quadtree_address.contracts import MAX_DEPTH, START_CHAR, Quadrant
from quadtree_address.errors import InvalidEncodingError, NullInputError

DEPTH_UNIT = 1 << 58
SECTOR_MASK = 0b11
# clears the unused top bit and the reserved bits 52-57
PRE_MASK = 0x7C0F_FFFF_FFFF_FFFF
MAX_PACKED = (1 << 63) - 1


def _text_of(quad_tree: object) -> str:
    """Accept address text or any object exposing a `quad_tree` attribute."""
    if quad_tree is not None and not isinstance(quad_tree, str) and hasattr(quad_tree, "quad_tree"):
        quad_tree = quad_tree.quad_tree
    return require_valid(quad_tree)


def to_number_representation(quad_tree: object) -> int:
    """Pack a valid address into its 64-bit integer form."""
    text = _text_of(quad_tree)
    depth = len(text) - 1

    sectors = 0
    for char in reversed(text[1:]):
        sectors = (sectors << 2) | Quadrant(char).code
    return depth * DEPTH_UNIT + sectors


def to_letter_representation(value: object) -> str:
    """Unpack a 64-bit integer produced by `to_number_representation`."""
    if value is None:
        raise NullInputError("packed quad tree must not be None")
    if isinstance(value, bool):
        raise InvalidEncodingError(f"packed quad tree must be an integer, got {value!r}")
    # accepts numpy unsigned scalars as produced by the batch helpers
    try:
        value = operator.index(value)
    except TypeError as exc:
        raise InvalidEncodingError(f"packed quad tree must be an integer, got {value!r}") from exc
    # values with bit 63 set are negative as a signed 64-bit word
    if value < 0 or value > MAX_PACKED:
        raise InvalidEncodingError(f"invalid packed quad tree: {value}")

    masked = value & PRE_MASK
    depth = masked // DEPTH_UNIT
    if depth > MAX_DEPTH:
        raise InvalidEncodingError(f"packed quad tree depth {depth} exceeds {MAX_DEPTH}")

    letters = [Quadrant.from_code((masked >> (2 * i)) & SECTOR_MASK).value for i in range(depth)]
    return START_CHAR + "".join(letters)
