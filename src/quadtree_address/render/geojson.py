"""GeoJSON rendering of address tiles."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from quadtree_address.config import get_settings
from quadtree_address.contracts import Wgs84Point
from quadtree_address.errors import NullInputError

if TYPE_CHECKING:
    from quadtree_address.address.codec import QuadTreeAddress


def _position(point: Wgs84Point) -> list[float]:
    """GeoJSON positions are [longitude, latitude] in degrees."""
    return [point.longitude_deg, point.latitude_deg]


def to_geojson_dict(address: QuadTreeAddress) -> dict[str, Any]:
    """Build a Feature whose Polygon ring runs UL, UR, LR, LL and back to UL."""
    if address is None:
        raise NullInputError("address must not be None")
    ring = [
        _position(address.upper_left),
        _position(address.upper_right),
        _position(address.lower_right),
        _position(address.lower_left),
        _position(address.upper_left),
    ]
    return {
        "type": "Feature",
        "properties": {"quadTree": address.quad_tree},
        "geometry": {"type": "Polygon", "coordinates": [ring]},
    }


def to_geojson(address: QuadTreeAddress, indent: int | None = None) -> str:
    """Serialize an address tile as a GeoJSON Feature string."""
    if indent is None:
        indent = get_settings().geojson_indent
    return json.dumps(to_geojson_dict(address), indent=indent)
