"""Value objects for the campus domain.

Value objects are immutable. Each one offers a ``create`` factory that
returns a Result instead of raising; constructing the dataclass directly
enforces the same invariants and raises ValueError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .results import FailureType, Result

BUILDING_CODE_MAX_LENGTH = 5
MIN_BUILDING_DIMENSION = 1

_ALPHANUMERIC_AND_SPACES = re.compile(r"^[A-Za-z0-9 ]+$")


def as_integer(value: object) -> int | None:
    """Return value as an int if it is integral, else None.

    Integral floats (``2.0``) count as integers; booleans do not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class DoorOrientation(str, Enum):
    """Direction a room door faces on the floor grid."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    WEST = "WEST"
    EAST = "EAST"

    def step(self) -> tuple[int, int]:
        """Grid offset (dx, dy) of the cell the door opens onto."""
        return _ORIENTATION_STEPS[self]


_ORIENTATION_STEPS: dict[DoorOrientation, tuple[int, int]] = {
    DoorOrientation.NORTH: (0, -1),
    DoorOrientation.SOUTH: (0, 1),
    DoorOrientation.WEST: (-1, 0),
    DoorOrientation.EAST: (1, 0),
}


@dataclass(frozen=True)
class Coordinates:
    """Integer cell on a floor grid, origin at the top-left corner."""

    x: int
    y: int

    def __post_init__(self) -> None:
        error = self._validate(self.x, self.y)
        if error:
            raise ValueError(error)
        object.__setattr__(self, "x", as_integer(self.x))
        object.__setattr__(self, "y", as_integer(self.y))

    @staticmethod
    def _validate(x: object, y: object) -> str | None:
        ix, iy = as_integer(x), as_integer(y)
        if ix is None or iy is None:
            return "Coordinates must be integer numbers."
        if ix < 0 or iy < 0:
            return "Coordinates must be positive numbers."
        return None

    @classmethod
    def create(cls, x: object, y: object) -> Result[Coordinates]:
        """Create coordinates after validating both components.

        Args:
            x: Column index, must be a non-negative integer.
            y: Row index, must be a non-negative integer.

        Returns:
            Result holding the coordinates, or an INVALID_INPUT failure.
        """
        error = cls._validate(x, y)
        if error:
            return Result.fail(error, FailureType.INVALID_INPUT)
        return Result.ok(cls(x=as_integer(x), y=as_integer(y)))  # type: ignore[arg-type]

    def equals(self, other: Coordinates) -> bool:
        """Check if both coordinates point to the same cell."""
        return self.x == other.x and self.y == other.y

    def is_next_to(self, other: Coordinates) -> bool:
        """Check if other is one step away along exactly one axis."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return (dx == 1 and dy == 0) or (dx == 0 and dy == 1)


@dataclass(frozen=True)
class BuildingDimensions:
    """Rectangular footprint of a building, in grid cells."""

    width: int
    length: int

    def __post_init__(self) -> None:
        error = self._validate(self.width, self.length)
        if error:
            raise ValueError(error)
        object.__setattr__(self, "width", as_integer(self.width))
        object.__setattr__(self, "length", as_integer(self.length))

    @staticmethod
    def _validate(width: object, length: object) -> str | None:
        if width is None or length is None:
            return "width and length are required"
        iw, il = as_integer(width), as_integer(length)
        if iw is None or il is None:
            return "Building dimensions must be integers."
        if iw < MIN_BUILDING_DIMENSION or il < MIN_BUILDING_DIMENSION:
            return "Building dimensions must be greater than 0."
        return None

    @classmethod
    def create(cls, width: object, length: object) -> Result[BuildingDimensions]:
        """Create building dimensions, both integers of at least 1."""
        error = cls._validate(width, length)
        if error:
            return Result.fail(error, FailureType.INVALID_INPUT)
        return Result.ok(cls(width=as_integer(width), length=as_integer(length)))  # type: ignore[arg-type]


@dataclass(frozen=True)
class BuildingCode:
    """Short alphanumeric code identifying a building (e.g. "B")."""

    value: str

    @classmethod
    def create(
        cls, value: str | None, max_length: int = BUILDING_CODE_MAX_LENGTH
    ) -> Result[BuildingCode]:
        """Create a building code.

        Args:
            value: The code text.
            max_length: Maximum number of characters allowed.

        Returns:
            Result holding the code, or an INVALID_INPUT failure.
        """
        if value is None:
            return Result.fail("Building Code is null or undefined")
        if not value.strip():
            return Result.fail("Building Code cannot be empty.")
        if len(value) > max_length:
            return Result.fail(
                f"Building Code must be between 1 and {max_length} characters."
            )
        if not _ALPHANUMERIC_AND_SPACES.match(value):
            return Result.fail("Building Code must only contain alphanumerics and spaces.")
        return Result.ok(cls(value=value))


@dataclass(frozen=True)
class FloorNumber:
    """Floor level within a building; may be negative for basements."""

    value: int

    @classmethod
    def create(cls, value: object) -> Result[FloorNumber]:
        """Create a floor number from an integer value."""
        number = as_integer(value)
        if number is None:
            return Result.fail("Floor number must be an integer.")
        return Result.ok(cls(value=number))
