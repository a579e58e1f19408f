"""Batch key generation: tile coverings of lat/lon boxes and packed uint64 keys."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

import numpy as np

from quadtree_address.address.codec import QuadTreeAddress
from quadtree_address.address.neighbors import Direction
from quadtree_address.address.numeric import to_letter_representation
from quadtree_address.contracts import Wgs84Point
from quadtree_address.errors import InvalidCoordinateError

NDArray: TypeAlias = Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Lat/lon box in decimal degrees, edges inclusive."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def __post_init__(self) -> None:
        upper_left, lower_right = self.upper_left, self.lower_right
        if lower_right.latitude_e7 > upper_left.latitude_e7:
            raise InvalidCoordinateError("lat_min must be <= lat_max.")
        if lower_right.longitude_e7 < upper_left.longitude_e7:
            raise InvalidCoordinateError("lon_min must be <= lon_max.")

    @property
    def upper_left(self) -> Wgs84Point:
        return Wgs84Point.from_degrees(self.lat_max, self.lon_min)

    @property
    def lower_right(self) -> Wgs84Point:
        return Wgs84Point.from_degrees(self.lat_min, self.lon_max)


def covering_tiles(box: BoundingBox, depth: int, max_tiles: int | None = None) -> list[str]:
    """List the depth-`depth` tiles covering `box`, row by row from the north-west.

    The corner tiles are located by point encoding and the rest are reached by
    walking neighbors, so every returned address has exactly `depth` letters.
    """
    first = QuadTreeAddress.from_point(box.upper_left, depth)
    last = QuadTreeAddress.from_point(box.lower_right, depth)
    stop_lat = last.upper_left.latitude_e7
    stop_lon = last.upper_left.longitude_e7

    tiles: list[str] = []
    row = first
    while True:
        tile = row
        while True:
            if max_tiles is not None and len(tiles) >= max_tiles:
                raise ValueError("tile count exceeds max_tiles safety cap")
            tiles.append(tile.quad_tree)
            if tile.upper_left.longitude_e7 == stop_lon:
                break
            # WEST steps toward increasing longitude
            tile = tile.neighbor(Direction.WEST)
        if row.upper_left.latitude_e7 == stop_lat:
            break
        row = row.neighbor(Direction.SOUTH)

    logger.debug("covered box %s with %d tiles at depth %d", box, len(tiles), depth)
    return tiles


def _to_point(value: Wgs84Point | tuple[float, float]) -> Wgs84Point:
    if isinstance(value, Wgs84Point):
        return value
    lat, lon = value
    return Wgs84Point.from_degrees(lat, lon)


def pack_points(points: Iterable[Wgs84Point | tuple[float, float]], depth: int) -> NDArray:
    """Encode points at `depth` and return their packed keys as a uint64 array."""
    keys = [QuadTreeAddress.from_point(_to_point(point), depth).to_number() for point in points]
    return np.array(keys, np.uint64)


def covering_keys(box: BoundingBox, depth: int, max_tiles: int | None = None) -> NDArray:
    """Packed keys of `covering_tiles`, in the same order."""
    keys = [QuadTreeAddress.from_string(text).to_number() for text in covering_tiles(box, depth, max_tiles)]
    return np.array(keys, np.uint64)


def unpack_keys(values: NDArray | Sequence[int]) -> list[str]:
    """Decode packed keys from a numpy array or an int sequence into address text."""
    if hasattr(values, "tolist"):
        raw = values.tolist()
    else:
        raw = list(values)
    return [to_letter_representation(value) for value in raw]
