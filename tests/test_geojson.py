"""Tests for GeoJSON rendering of address tiles."""

from __future__ import annotations

import json

import pytest

from quadtree_address.address.codec import QuadTreeAddress
from quadtree_address.config import get_settings
from quadtree_address.errors import NullInputError
from quadtree_address.render.geojson import to_geojson, to_geojson_dict


def test_feature_ring_is_closed_and_in_degrees() -> None:
    """Ring order is UL, UR, LR, LL, UL as [lon, lat] degree pairs."""
    feature = to_geojson_dict(QuadTreeAddress.from_string("+BAC"))

    assert feature["type"] == "Feature"
    assert feature["properties"] == {"quadTree": "+BAC"}
    assert feature["geometry"]["type"] == "Polygon"
    assert feature["geometry"]["coordinates"] == [
        [[0.0, 67.5], [45.0, 67.5], [45.0, 45.0], [0.0, 45.0], [0.0, 67.5]]
    ]


def test_to_geojson_serializes_feature(monkeypatch: pytest.MonkeyPatch) -> None:
    """The string form should parse back to the feature dict."""
    monkeypatch.delenv("QUADTREE_GEOJSON_INDENT", raising=False)
    get_settings.cache_clear()
    try:
        address = QuadTreeAddress.from_string("+ACAB")
        text = address.to_geojson()
    finally:
        get_settings.cache_clear()

    assert "\n" not in text
    assert json.loads(text) == to_geojson_dict(address)


def test_to_geojson_honours_explicit_indent() -> None:
    """An explicit indent should override the configured one."""
    text = to_geojson(QuadTreeAddress.from_string("+A"), indent=2)

    assert text.startswith("{\n  ")
    assert json.loads(text)["properties"]["quadTree"] == "+A"


def test_to_geojson_rejects_none() -> None:
    """Rendering None should raise the null-input error."""
    with pytest.raises(NullInputError):
        to_geojson_dict(None)  # type: ignore[arg-type]
