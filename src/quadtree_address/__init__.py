"""Hierarchical quad tree addresses for WGS84 coordinates."""

from quadtree_address.address.codec import (
    QuadTreeAddress,
    contains,
    contains_point,
    shorten_to_depth,
)
from quadtree_address.address.neighbors import (
    Direction,
    eastern_neighbor,
    neighbors,
    northern_neighbor,
    southern_neighbor,
    western_neighbor,
)
from quadtree_address.address.numeric import to_letter_representation, to_number_representation
from quadtree_address.address.validation import get_depth, is_valid
from quadtree_address.contracts import MAX_DEPTH, START_CHAR, Quadrant, Wgs84Point
from quadtree_address.errors import (
    InsufficientDepthError,
    InvalidAddressError,
    InvalidCoordinateError,
    InvalidDepthError,
    InvalidDirectionError,
    InvalidEncodingError,
    NullInputError,
    QuadTreeAddressError,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_DEPTH",
    "START_CHAR",
    "Direction",
    "InsufficientDepthError",
    "InvalidAddressError",
    "InvalidCoordinateError",
    "InvalidDepthError",
    "InvalidDirectionError",
    "InvalidEncodingError",
    "NullInputError",
    "QuadTreeAddress",
    "QuadTreeAddressError",
    "Quadrant",
    "Wgs84Point",
    "contains",
    "contains_point",
    "eastern_neighbor",
    "get_depth",
    "is_valid",
    "neighbors",
    "northern_neighbor",
    "shorten_to_depth",
    "southern_neighbor",
    "to_letter_representation",
    "to_number_representation",
    "western_neighbor",
]
