"""Tests for same-depth neighbor computation."""

from __future__ import annotations

import pytest

from quadtree_address.address.codec import QuadTreeAddress
from quadtree_address.address.neighbors import (
    Direction,
    eastern_neighbor,
    neighbors,
    northern_neighbor,
    shift,
    southern_neighbor,
    western_neighbor,
)
from quadtree_address.errors import (
    InsufficientDepthError,
    InvalidAddressError,
    InvalidDirectionError,
    NullInputError,
)


def test_single_direction_shifts() -> None:
    """Each named shift should move one tile in its direction."""
    assert northern_neighbor("+ACAB") == "+AACD"
    assert southern_neighbor("+ACAB") == "+ACAD"
    assert eastern_neighbor("+ACAB") == "+ACAA"
    assert western_neighbor("+ACAB") == "+ACBA"


def test_carry_runs_through_every_level() -> None:
    """A carry at every level should rewrite every letter."""
    assert northern_neighbor("+AAAAA") == "+CCCCC"
    assert eastern_neighbor("+AAAAA") == "+BBBBB"


def test_max_depth_shift_rolls_over_top_level() -> None:
    """Shifting past the map edge rewrites the top letter instead of failing."""
    assert northern_neighbor("+" + "B" * 26) == "+" + "D" * 26


def test_vertical_shifts_are_inverse() -> None:
    """Opposite shifts should undo each other."""
    for text in ("+ACAB", "+DDCA", "+BACCCBBCADBBDBA"):
        assert southern_neighbor(northern_neighbor(text)) == text
        assert western_neighbor(eastern_neighbor(text)) == text


def test_shift_accepts_direction_names() -> None:
    """Directions may be given as members or names; unknown names fail."""
    assert shift("+ACAB", "north") == shift("+ACAB", Direction.NORTH) == "+AACD"
    with pytest.raises(InvalidDirectionError, match="unknown direction"):
        shift("+ACAB", "up")


def test_shift_rejects_missing_direction() -> None:
    """A None direction should raise the null-input error."""
    with pytest.raises(NullInputError, match="direction"):
        shift("+ACAB", None)


def test_northern_neighbor_shares_an_edge() -> None:
    """The northern tile's lower edge is the original tile's upper edge."""
    address = QuadTreeAddress.from_string("+ACAB")
    north = address.neighbor(Direction.NORTH)

    assert north.quad_tree == "+AACD"
    assert north.lower_left == address.upper_left
    assert north.lower_right == address.upper_right


def test_eight_neighbors() -> None:
    """The neighbor set should hold the eight surrounding tiles."""
    expected = {"+AACD", "+ACAD", "+ACAA", "+ACBA", "+AACC", "+AADC", "+ACAC", "+ACBC"}

    assert neighbors("+ACAB") == expected
    assert QuadTreeAddress.from_string("+ACAB").neighbors() == expected


def test_eight_neighbors_require_depth_two() -> None:
    """The neighbor set needs at least two letters."""
    with pytest.raises(InsufficientDepthError, match="at least 2"):
        neighbors("+A")


def test_single_shift_requires_depth_one() -> None:
    """Single shifts need at least one letter."""
    with pytest.raises(InsufficientDepthError, match="at least 1"):
        northern_neighbor("+")


def test_invalid_text_is_rejected() -> None:
    """Malformed address text should be rejected before shifting."""
    with pytest.raises(InvalidAddressError):
        neighbors("+EEEF")
    with pytest.raises(InvalidAddressError):
        eastern_neighbor("ACAB")
