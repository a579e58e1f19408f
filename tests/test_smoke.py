"""Smoke tests for the package surface."""

import quadtree_address


def test_package_import_smoke() -> None:
    """Top-level exports cover the address operations."""
    address = quadtree_address.QuadTreeAddress.from_string("+ACAB")

    assert quadtree_address.is_valid("+ACABD")
    assert quadtree_address.northern_neighbor(address.quad_tree) == "+AACD"
    assert quadtree_address.to_letter_representation(address.to_number()) == "+ACAB"
    assert issubclass(quadtree_address.InvalidAddressError, ValueError)
    assert issubclass(quadtree_address.NullInputError, TypeError)
