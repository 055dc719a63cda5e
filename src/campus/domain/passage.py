"""Passage aggregate connecting floors of two different buildings."""

from __future__ import annotations

from dataclasses import dataclass

from .entities import Floor, new_domain_id
from .results import FailureType, Result, guard_against_none
from .value_objects import Coordinates

SAME_BUILDING_MESSAGE = "You can't create a passage between floors of the same building."


@dataclass(frozen=True)
class PassagePoint:
    """One end of a passage: a 1-cell wall segment on a floor border.

    Attributes:
        floor: Floor the passage attaches to.
        first_coordinates: Left or top cell of the segment.
        last_coordinates: Right or bottom cell of the segment.
    """

    floor: Floor
    first_coordinates: Coordinates
    last_coordinates: Coordinates

    def __post_init__(self) -> None:
        error = self._validate(self.floor, self.first_coordinates, self.last_coordinates)
        if error:
            raise ValueError(error)

    @staticmethod
    def _validate(
        floor: Floor | None,
        first_coordinates: Coordinates | None,
        last_coordinates: Coordinates | None,
    ) -> str | None:
        error = guard_against_none(
            [
                (floor, "floor"),
                (first_coordinates, "firstCoordinates"),
                (last_coordinates, "lastCoordinates"),
            ]
        )
        if error:
            return error
        assert floor is not None
        assert first_coordinates is not None and last_coordinates is not None
        if first_coordinates.equals(last_coordinates):
            return "Coordinates must be different."
        if not first_coordinates.is_next_to(last_coordinates):
            return "Coordinates must be next to each other."
        if not floor.are_coordinates_in_border(first_coordinates, last_coordinates):
            return "Coordinates must be in the border of the floor."
        return None

    @classmethod
    def create(
        cls,
        floor: Floor | None,
        first_coordinates: Coordinates | None,
        last_coordinates: Coordinates | None,
    ) -> Result[PassagePoint]:
        """Create a passage point after validating its placement.

        Checks, in order: all arguments present, cells distinct, cells
        adjacent along exactly one axis, both cells on the building border.

        Returns:
            Result holding the point, or an INVALID_INPUT failure naming the
            first broken rule.
        """
        error = cls._validate(floor, first_coordinates, last_coordinates)
        if error:
            return Result.fail(error, FailureType.INVALID_INPUT)
        return Result.ok(
            cls(
                floor=floor,  # type: ignore[arg-type]
                first_coordinates=first_coordinates,  # type: ignore[arg-type]
                last_coordinates=last_coordinates,  # type: ignore[arg-type]
            )
        )

    @classmethod
    def from_values(
        cls,
        floor: Floor | None,
        first_x: object,
        first_y: object,
        last_x: object,
        last_y: object,
    ) -> Result[PassagePoint]:
        """Create a passage point from raw coordinate components."""
        first_or_error = Coordinates.create(first_x, first_y)
        if first_or_error.is_failure:
            return Result.fail(first_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]
        last_or_error = Coordinates.create(last_x, last_y)
        if last_or_error.is_failure:
            return Result.fail(last_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]
        return cls.create(floor, first_or_error.get_value(), last_or_error.get_value())


@dataclass
class Passage:
    """A passage between a floor of one building and a floor of another.

    Points are never mutated; updates swap in a freshly validated point.
    """

    domain_id: str
    start_point: PassagePoint
    end_point: PassagePoint

    @classmethod
    def create(
        cls,
        start_point: PassagePoint | None,
        end_point: PassagePoint | None,
        domain_id: str | None = None,
    ) -> Result[Passage]:
        """Create a passage joining two points on different buildings.

        Args:
            start_point: First end of the passage.
            end_point: Second end of the passage.
            domain_id: Identity to use; a new one is generated if omitted.

        Returns:
            Result holding the passage, or an INVALID_INPUT failure.
        """
        error = guard_against_none(
            [(start_point, "passageStartPoint"), (end_point, "passageEndPoint")]
        )
        if error:
            return Result.fail(error, FailureType.INVALID_INPUT)
        assert start_point is not None and end_point is not None
        if start_point.floor.is_in_same_building(end_point.floor):
            return Result.fail(SAME_BUILDING_MESSAGE, FailureType.INVALID_INPUT)
        return Result.ok(
            cls(
                domain_id=domain_id or new_domain_id(),
                start_point=start_point,
                end_point=end_point,
            )
        )

    def update_start_point(
        self,
        floor: Floor | None,
        first_x: object,
        first_y: object,
        last_x: object,
        last_y: object,
    ) -> Result[None]:
        """Replace the start point with a newly validated one."""
        point_or_error = PassagePoint.from_values(floor, first_x, first_y, last_x, last_y)
        if point_or_error.is_failure:
            return Result.fail(point_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]
        self.start_point = point_or_error.get_value()
        return Result.ok()

    def update_end_point(
        self,
        floor: Floor | None,
        first_x: object,
        first_y: object,
        last_x: object,
        last_y: object,
    ) -> Result[None]:
        """Replace the end point with a newly validated one."""
        point_or_error = PassagePoint.from_values(floor, first_x, first_y, last_x, last_y)
        if point_or_error.is_failure:
            return Result.fail(point_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]
        self.end_point = point_or_error.get_value()
        return Result.ok()

    def connects_floor(self, floor_id: str) -> bool:
        """Check if either end of the passage is on the given floor."""
        return floor_id in (self.start_point.floor.domain_id, self.end_point.floor.domain_id)
