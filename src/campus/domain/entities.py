"""Domain entities for the campus: buildings and their floors."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from .results import FailureType, Result, guard_against_none
from .services.geometry import is_on_border
from .value_objects import BuildingCode, BuildingDimensions, Coordinates, FloorNumber


def new_domain_id() -> str:
    """Generate a fresh domain identifier."""
    return str(uuid4())


@dataclass
class Building:
    """A campus building with a rectangular footprint.

    Attributes:
        domain_id: Identity of the building.
        code: Short building code used in messages (e.g. "A").
        dimensions: Footprint in grid cells; the source of truth for borders.
        name: Optional display name.
        description: Optional free-text description.
    """

    domain_id: str
    code: BuildingCode
    dimensions: BuildingDimensions
    name: str | None = None
    description: str | None = None

    @classmethod
    def create(
        cls,
        code: BuildingCode | None,
        dimensions: BuildingDimensions | None,
        name: str | None = None,
        description: str | None = None,
        domain_id: str | None = None,
    ) -> Result[Building]:
        """Create a building, requiring a code and dimensions."""
        error = guard_against_none(
            [(code, "buildingCode"), (dimensions, "buildingDimensions")]
        )
        if error:
            return Result.fail(error, FailureType.INVALID_INPUT)
        return Result.ok(
            cls(
                domain_id=domain_id or new_domain_id(),
                code=code,  # type: ignore[arg-type]
                dimensions=dimensions,  # type: ignore[arg-type]
                name=name,
                description=description,
            )
        )

    def is_coordinate_in_border(self, coordinates: Coordinates) -> bool:
        """Check if a cell lies on the outer border of this building."""
        return is_on_border(coordinates, self.dimensions.width, self.dimensions.length)


@dataclass
class Floor:
    """One floor of a building.

    Floors share the footprint of their building, so every border check
    is delegated to it.
    """

    domain_id: str
    building: Building
    floor_number: FloorNumber
    description: str | None = None

    @classmethod
    def create(
        cls,
        building: Building | None,
        floor_number: FloorNumber | None,
        description: str | None = None,
        domain_id: str | None = None,
    ) -> Result[Floor]:
        """Create a floor, requiring its building and number."""
        error = guard_against_none([(building, "building"), (floor_number, "floorNumber")])
        if error:
            return Result.fail(error, FailureType.INVALID_INPUT)
        return Result.ok(
            cls(
                domain_id=domain_id or new_domain_id(),
                building=building,  # type: ignore[arg-type]
                floor_number=floor_number,  # type: ignore[arg-type]
                description=description,
            )
        )

    @property
    def label(self) -> str:
        """Building code followed by floor number, e.g. "B2"."""
        return f"{self.building.code.value}{self.floor_number.value}"

    def are_coordinates_in_border(
        self, first_coordinates: Coordinates, last_coordinates: Coordinates
    ) -> bool:
        """Check if both cells lie on the border of the building."""
        if not self.building.is_coordinate_in_border(first_coordinates):
            return False
        return self.building.is_coordinate_in_border(last_coordinates)

    def is_in_same_building(self, other: Floor) -> bool:
        """Check if other belongs to the same building as this floor."""
        return self.building.domain_id == other.building.domain_id
