"""Quad tree addresses over the WGS84 world map.

The world rectangle (+-90 degrees latitude, +-180 degrees longitude) is split
into four tiles per level. Letters name the tile chosen at each level:

    A  upper left     B  upper right
    C  lower left     D  lower right

An address is the start marker ``+`` followed by up to 26 letters. Bounds are
kept as tenth-microdegree integers so that encoding a point and decoding the
resulting text always agree on the tile corners. Points lying exactly on a
split line belong to the upper/right tile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quadtree_address.address import neighbors as _neighbors
from quadtree_address.address.numeric import to_letter_representation, to_number_representation
from quadtree_address.address.validation import get_depth, require_valid
from quadtree_address.config import get_settings
from quadtree_address.contracts import (
    MAX_DEPTH,
    MAX_LATITUDE_E7,
    MAX_LONGITUDE_E7,
    MIN_LATITUDE_E7,
    MIN_LONGITUDE_E7,
    START_CHAR,
    Quadrant,
    Wgs84Point,
)
from quadtree_address.errors import InvalidDepthError, NullInputError
from quadtree_address.render.geojson import to_geojson


def _midpoint(high: int, low: int) -> int:
    """Integer midpoint truncated toward zero."""
    total = high + low
    if total < 0:
        return -(-total // 2)
    return total // 2


@dataclass(slots=True)
class _Bounds:
    lat_high: int = MAX_LATITUDE_E7
    lat_low: int = MIN_LATITUDE_E7
    lon_high: int = MAX_LONGITUDE_E7
    lon_low: int = MIN_LONGITUDE_E7

    def narrow(self, quadrant: Quadrant) -> None:
        lat_mid = _midpoint(self.lat_high, self.lat_low)
        lon_mid = _midpoint(self.lon_high, self.lon_low)
        if quadrant.is_upper:
            self.lat_low = lat_mid
        else:
            self.lat_high = lat_mid
        if quadrant.is_right:
            self.lon_low = lon_mid
        else:
            self.lon_high = lon_mid

    def select(self, point: Wgs84Point) -> Quadrant:
        """Pick the quadrant containing `point` and narrow to it."""
        upper = point.latitude_e7 >= _midpoint(self.lat_high, self.lat_low)
        right = point.longitude_e7 >= _midpoint(self.lon_high, self.lon_low)
        quadrant = Quadrant.from_halves(upper, right)
        self.narrow(quadrant)
        return quadrant


@dataclass(frozen=True, slots=True)
class QuadTreeAddress:
    """Immutable address value; equality and hashing use the text only."""

    quad_tree: str
    upper_left: Wgs84Point = field(compare=False, repr=False)
    upper_right: Wgs84Point = field(compare=False, repr=False)
    lower_left: Wgs84Point = field(compare=False, repr=False)
    lower_right: Wgs84Point = field(compare=False, repr=False)
    center: Wgs84Point = field(compare=False, repr=False)

    @classmethod
    def _from_bounds(cls, quad_tree: str, bounds: _Bounds) -> QuadTreeAddress:
        return cls(
            quad_tree=quad_tree,
            upper_left=Wgs84Point(bounds.lat_high, bounds.lon_low),
            upper_right=Wgs84Point(bounds.lat_high, bounds.lon_high),
            lower_left=Wgs84Point(bounds.lat_low, bounds.lon_low),
            lower_right=Wgs84Point(bounds.lat_low, bounds.lon_high),
            center=Wgs84Point(
                _midpoint(bounds.lat_high, bounds.lat_low),
                _midpoint(bounds.lon_high, bounds.lon_low),
            ),
        )

    @classmethod
    def from_point(cls, point: Wgs84Point, depth: int | None = None) -> QuadTreeAddress:
        """Return the depth-`depth` tile containing `point`.

        When `depth` is omitted the configured default depth is used.
        """
        if point is None:
            raise NullInputError("point must not be None")
        if depth is None:
            depth = get_settings().default_depth
        if isinstance(depth, bool) or not isinstance(depth, int) or not 1 <= depth <= MAX_DEPTH:
            raise InvalidDepthError(f"invalid depth: {depth!r}")

        bounds = _Bounds()
        letters = [bounds.select(point).value for _ in range(depth)]
        return cls._from_bounds(START_CHAR + "".join(letters), bounds)

    @classmethod
    def from_string(cls, quad_tree: str) -> QuadTreeAddress:
        """Parse address text and derive its tile corners."""
        text = require_valid(quad_tree)
        bounds = _Bounds()
        for char in text[1:]:
            bounds.narrow(Quadrant(char))
        return cls._from_bounds(text, bounds)

    @classmethod
    def from_number(cls, value: int) -> QuadTreeAddress:
        """Decode a packed 64-bit address."""
        return cls.from_string(to_letter_representation(value))

    @property
    def depth(self) -> int:
        return len(self.quad_tree) - 1

    @property
    def digits(self) -> tuple[Quadrant, ...]:
        return tuple(Quadrant(char) for char in self.quad_tree[1:])

    def contains(self, other: QuadTreeAddress | Wgs84Point | str) -> bool:
        """Return True when `other` (address, address text or point) lies in this tile."""
        if other is None:
            raise NullInputError("other must not be None")
        if isinstance(other, Wgs84Point):
            return contains_point(self.quad_tree, other)
        if isinstance(other, QuadTreeAddress):
            return contains(self.quad_tree, other.quad_tree)
        return contains(self.quad_tree, other)

    def shorten_to(self, depth: int) -> QuadTreeAddress:
        return shorten_to_depth(self.quad_tree, depth)

    def to_number(self) -> int:
        return to_number_representation(self.quad_tree)

    def neighbor(self, direction: _neighbors.Direction | str) -> QuadTreeAddress:
        """Return the same-depth tile adjacent in `direction`."""
        return QuadTreeAddress.from_string(_neighbors.shift(self.quad_tree, direction))

    def neighbors(self) -> frozenset[str]:
        return _neighbors.neighbors(self.quad_tree)

    def to_geojson(self) -> str:
        return to_geojson(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize address text, depth and tile points to a JSON-compatible dictionary."""
        return {
            "quad_tree": self.quad_tree,
            "depth": self.depth,
            "upper_left": self.upper_left.to_dict(),
            "upper_right": self.upper_right.to_dict(),
            "lower_left": self.lower_left.to_dict(),
            "lower_right": self.lower_right.to_dict(),
            "center": self.center.to_dict(),
        }

    def __str__(self) -> str:
        return self.quad_tree


def contains(outer: str, inner: str) -> bool:
    """Return True when address `outer` contains address `inner`.

    Both texts carry the start marker, so the substring test can only match
    at the beginning of `inner`.
    """
    outer_text = require_valid(outer)
    inner_text = require_valid(inner)
    return outer_text in inner_text


def contains_point(quad_tree: str, point: Wgs84Point) -> bool:
    """Return True when `point` falls inside the tile named by `quad_tree`."""
    text = require_valid(quad_tree)
    if point is None:
        raise NullInputError("point must not be None")
    expansion = QuadTreeAddress.from_point(point, MAX_DEPTH)
    return contains(text, expansion.quad_tree)


def shorten_to_depth(quad_tree: str, depth: int) -> QuadTreeAddress:
    """Truncate an address to `depth` levels; shallower addresses are returned as-is."""
    current = get_depth(quad_tree)
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise InvalidDepthError(f"invalid depth: {depth!r}")
    if depth >= current:
        return QuadTreeAddress.from_string(quad_tree)
    return QuadTreeAddress.from_string(quad_tree[: depth + 1])
