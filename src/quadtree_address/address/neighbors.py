"""Same-depth neighbors of an address via carry-propagating letter shifts.

Each direction maps every quadrant letter to its mirror across one axis. When
the mirrored letter lands on the far side of its parent tile, the shift also
has to move the parent, so the scan continues one level shallower. The
top-level letter is rewritten without further carry, which means shifts past
the poles or the antimeridian produce an address on the opposite map edge
rather than an error.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from quadtree_address.address.validation import require_valid
from quadtree_address.contracts import START_CHAR, Quadrant
from quadtree_address.errors import InsufficientDepthError, InvalidDirectionError, NullInputError

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


_I, _II, _III, _IV = Quadrant.I, Quadrant.II, Quadrant.III, Quadrant.IV

# (direction, letter) -> (replacement, carry to the next shallower level)
# EAST and WEST keep the published naming (east of +ACAB is +ACAA), so EAST
# steps toward decreasing longitude.
_SHIFT_TABLE: dict[tuple[Direction, Quadrant], tuple[Quadrant, bool]] = {
    (Direction.EAST, _I): (_II, True),
    (Direction.EAST, _II): (_I, False),
    (Direction.EAST, _III): (_IV, True),
    (Direction.EAST, _IV): (_III, False),
    (Direction.WEST, _I): (_II, False),
    (Direction.WEST, _II): (_I, True),
    (Direction.WEST, _III): (_IV, False),
    (Direction.WEST, _IV): (_III, True),
    (Direction.NORTH, _I): (_III, True),
    (Direction.NORTH, _II): (_IV, True),
    (Direction.NORTH, _III): (_I, False),
    (Direction.NORTH, _IV): (_II, False),
    (Direction.SOUTH, _I): (_III, False),
    (Direction.SOUTH, _II): (_IV, False),
    (Direction.SOUTH, _III): (_I, True),
    (Direction.SOUTH, _IV): (_II, True),
}


def _digits_of(quad_tree: object, min_depth: int) -> list[Quadrant]:
    text = require_valid(quad_tree)
    if len(text) - 1 < min_depth:
        raise InsufficientDepthError(
            f"quad tree {text!r} must have a depth of at least {min_depth}"
        )
    return [Quadrant(char) for char in text[1:]]


def _to_text(digits: list[Quadrant]) -> str:
    return START_CHAR + "".join(digit.value for digit in digits)


def shift(quad_tree: object, direction: Direction | str) -> str:
    """Return the same-depth address one tile away in `direction`."""
    if direction is None:
        raise NullInputError("direction must not be None")
    try:
        direction = Direction(direction)
    except (TypeError, ValueError) as exc:
        raise InvalidDirectionError(f"unknown direction: {direction!r}") from exc
    digits = _digits_of(quad_tree, 1)

    carry = True
    for index in range(len(digits) - 1, -1, -1):
        digits[index], carry = _SHIFT_TABLE[(direction, digits[index])]
        if not carry:
            break
    if carry:
        logger.debug("%s shift of %s rolled over the top-level tile", direction, quad_tree)
    return _to_text(digits)


def northern_neighbor(quad_tree: object) -> str:
    return shift(quad_tree, Direction.NORTH)


def southern_neighbor(quad_tree: object) -> str:
    return shift(quad_tree, Direction.SOUTH)


def eastern_neighbor(quad_tree: object) -> str:
    return shift(quad_tree, Direction.EAST)


def western_neighbor(quad_tree: object) -> str:
    return shift(quad_tree, Direction.WEST)


def neighbors(quad_tree: object) -> frozenset[str]:
    """Return the eight surrounding addresses of an address of depth >= 2."""
    text = _to_text(_digits_of(quad_tree, 2))

    north = northern_neighbor(text)
    south = southern_neighbor(text)
    return frozenset(
        {
            north,
            eastern_neighbor(north),
            western_neighbor(north),
            south,
            eastern_neighbor(south),
            western_neighbor(south),
            eastern_neighbor(text),
            western_neighbor(text),
        }
    )
