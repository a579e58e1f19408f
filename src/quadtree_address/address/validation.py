"""Syntax and depth checks for quad tree address text."""

from __future__ import annotations

from quadtree_address.contracts import MAX_DEPTH, QUADRANT_LETTERS, START_CHAR
from quadtree_address.errors import InvalidAddressError, NullInputError


def is_valid(quad_tree: object) -> bool:
    """Return True when text is a start marker followed by at most MAX_DEPTH letters."""
    if not isinstance(quad_tree, str):
        return False
    if len(quad_tree) - 1 > MAX_DEPTH:
        return False
    if not quad_tree.startswith(START_CHAR):
        return False
    return all(char in QUADRANT_LETTERS for char in quad_tree[1:])


def require_valid(quad_tree: object) -> str:
    """Return the text unchanged or raise if it is not a valid address."""
    if quad_tree is None:
        raise NullInputError("quad tree must not be None")
    if not is_valid(quad_tree):
        raise InvalidAddressError(f"quad tree is invalid: {quad_tree!r}")
    return quad_tree  # type: ignore[return-value]


def get_depth(quad_tree: object) -> int:
    """Return the number of subdivision letters in a valid address."""
    return len(require_valid(quad_tree)) - 1
