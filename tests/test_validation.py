"""Tests for address text validation."""

from __future__ import annotations

import pytest

from quadtree_address.address.validation import get_depth, is_valid, require_valid
from quadtree_address.errors import InvalidAddressError, NullInputError


def test_is_valid_accepts_well_formed_text() -> None:
    """Well-formed text should validate."""
    assert is_valid("+ACABD")
    assert is_valid("+")
    assert is_valid("+" + "D" * 26)


@pytest.mark.parametrize(
    "quad_tree",
    ["+BAEA", "ACABACAB", "", "+AB+A", "++A", "+abcd", "+" + "A" * 27, None, 42],
)
def test_is_valid_rejects_malformed_text(quad_tree: object) -> None:
    """Bad letters, missing or repeated markers, excess depth and non-text return False."""
    assert is_valid(quad_tree) is False


def test_get_depth_counts_letters_after_marker() -> None:
    """Depth is the number of letters after the marker."""
    assert get_depth("+ACABD") == 5
    assert get_depth("+") == 0


def test_require_valid_raises_typed_errors() -> None:
    """None and malformed text raise distinct error kinds."""
    with pytest.raises(NullInputError):
        require_valid(None)
    with pytest.raises(InvalidAddressError, match="invalid"):
        require_valid("+BAEA")
    with pytest.raises(InvalidAddressError):
        get_depth("ACABACAB")
