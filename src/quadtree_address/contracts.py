"""Core data contracts: quadrant letters and fixed-point WGS84 coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from math import isfinite
from typing import Any

from quadtree_address.errors import InvalidCoordinateError, NullInputError

DEGREE_TO_E7 = 10_000_000.0

MAX_LATITUDE_E7 = 900_000_000
MIN_LATITUDE_E7 = -MAX_LATITUDE_E7
MAX_LONGITUDE_E7 = 1_800_000_000
MIN_LONGITUDE_E7 = -MAX_LONGITUDE_E7

MAX_DEPTH = 26
START_CHAR = "+"


class Quadrant(StrEnum):
    """Quadrant of one subdivision step, rendered as its address letter."""

    I = "A"  # noqa: E741
    II = "B"
    III = "C"
    IV = "D"

    @property
    def code(self) -> int:
        """2-bit code used by the packed representation."""
        return _QUADRANT_TO_CODE[self]

    @property
    def is_upper(self) -> bool:
        return self in (Quadrant.I, Quadrant.II)

    @property
    def is_right(self) -> bool:
        return self in (Quadrant.II, Quadrant.IV)

    @classmethod
    def from_code(cls, code: int) -> Quadrant:
        """Map a 2-bit code back to its quadrant."""
        return _CODE_TO_QUADRANT[code & 0b11]

    @classmethod
    def from_halves(cls, upper: bool, right: bool) -> Quadrant:
        """Combine per-axis half selections into one quadrant."""
        return _HALVES_TO_QUADRANT[(upper, right)]


_QUADRANT_TO_CODE: dict[Quadrant, int] = {
    Quadrant.I: 0b00,
    Quadrant.II: 0b01,
    Quadrant.III: 0b10,
    Quadrant.IV: 0b11,
}
_CODE_TO_QUADRANT: dict[int, Quadrant] = {code: q for q, code in _QUADRANT_TO_CODE.items()}
_HALVES_TO_QUADRANT: dict[tuple[bool, bool], Quadrant] = {
    (True, False): Quadrant.I,
    (True, True): Quadrant.II,
    (False, False): Quadrant.III,
    (False, True): Quadrant.IV,
}

QUADRANT_LETTERS = frozenset(q.value for q in Quadrant)


def _require_e7(value: object, label: str, low: int, high: int) -> int:
    if value is None:
        raise NullInputError(f"{label} must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCoordinateError(f"{label} must be an integer, got {value!r}")
    if value < low or value > high:
        raise InvalidCoordinateError(f"{label} {value} is not within allowed range")
    return value


def _degrees_to_e7(value: object, label: str) -> int:
    if value is None:
        raise NullInputError(f"{label} must not be None")
    try:
        degrees = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinateError(f"{label} must be numeric, got {value!r}") from exc
    if not isfinite(degrees):
        raise InvalidCoordinateError(f"{label} must be finite, got {value!r}")
    # int() truncates toward zero
    return int(degrees * DEGREE_TO_E7)


@dataclass(frozen=True, slots=True)
class Wgs84Point:
    """WGS84 coordinate stored as tenth-microdegree integers."""

    latitude_e7: int
    longitude_e7: int

    def __post_init__(self) -> None:
        """Reject coordinates outside +-90 / +-180 degrees."""
        _require_e7(self.latitude_e7, "latitude", MIN_LATITUDE_E7, MAX_LATITUDE_E7)
        _require_e7(self.longitude_e7, "longitude", MIN_LONGITUDE_E7, MAX_LONGITUDE_E7)

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> Wgs84Point:
        """Build a point from decimal degrees, truncating to fixed-point.

        The range check applies to the truncated value, so an excess smaller
        than one tenth-microdegree (e.g. 90.00000005) collapses onto the
        world edge and is accepted.
        """
        return cls(_degrees_to_e7(latitude, "latitude"), _degrees_to_e7(longitude, "longitude"))

    @property
    def latitude_deg(self) -> float:
        return self.latitude_e7 / DEGREE_TO_E7

    @property
    def longitude_deg(self) -> float:
        return self.longitude_e7 / DEGREE_TO_E7

    def to_dict(self) -> dict[str, Any]:
        """Serialize the point to a JSON-compatible dictionary."""
        return {
            "latitude_e7": self.latitude_e7,
            "longitude_e7": self.longitude_e7,
            "latitude_deg": self.latitude_deg,
            "longitude_deg": self.longitude_deg,
        }
