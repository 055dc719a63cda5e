"""Door placement validation for rooms on a floor plan.

A door sits on a cell of the room's bounding rectangle and opens onto the
neighbouring cell in its orientation. That outward cell must lie outside
the room, inside the building, and be free of rooms, passages and
elevators.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..results import FailureType, Result
from ..value_objects import DoorOrientation
from .geometry import is_inside_building, is_inside_rectangle, is_on_rectangle_border

if TYPE_CHECKING:
    from campus.contracts.protocols import (
        BuildingRepositoryProtocol,
        PositionCheckerProtocol,
    )

    from ..entities import Floor

logger = logging.getLogger(__name__)

__all__ = ["DoorPositionChecker"]


class DoorPositionChecker:
    """Validates a door position against its room, building and neighbours.

    Attributes:
        position_checker: Occupancy oracle for floor cells.
        building_repo: Repository used to read the building footprint.
    """

    def __init__(
        self,
        position_checker: PositionCheckerProtocol,
        building_repo: BuildingRepositoryProtocol,
    ) -> None:
        self.position_checker = position_checker
        self.building_repo = building_repo

    async def is_position_valid(
        self,
        initial_x: int,
        initial_y: int,
        final_x: int,
        final_y: int,
        door_x: int,
        door_y: int,
        door_orientation: str,
        floor: Floor,
    ) -> Result[bool]:
        """Check whether a door may be placed at the given cell.

        Args:
            initial_x: Left column of the room rectangle.
            initial_y: Top row of the room rectangle.
            final_x: Right column of the room rectangle.
            final_y: Bottom row of the room rectangle.
            door_x: Column of the door cell.
            door_y: Row of the door cell.
            door_orientation: One of NORTH, SOUTH, WEST or EAST.
            floor: Floor the room is on.

        Returns:
            Result.ok(True) if the door is valid, otherwise a failure
            describing the first rule the door breaks.
        """
        if not is_on_rectangle_border(door_x, door_y, initial_x, initial_y, final_x, final_y):
            logger.error("Door is not in the border of the room.")
            return Result.fail("Door is not in the border of the room.", FailureType.INVALID_INPUT)

        try:
            dx, dy = DoorOrientation(door_orientation).step()
        except ValueError:
            return Result.fail("Invalid Door Orientation.", FailureType.INVALID_INPUT)
        outward_x, outward_y = door_x + dx, door_y + dy

        if is_inside_rectangle(outward_x, outward_y, initial_x, initial_y, final_x, final_y):
            return Result.fail(
                "Invalid door orientation, it should face the outside of the room.",
                FailureType.INVALID_INPUT,
            )

        building = await self.building_repo.find_by_domain_id(floor.building.domain_id)
        if building is None:
            return Result.fail("Building not found.", FailureType.ENTITY_DOES_NOT_EXIST)
        width, length = building.dimensions.width, building.dimensions.length
        if not is_inside_building(outward_x, outward_y, width, length):
            logger.error("Door is facing the outside of the building.")
            return Result.fail(
                "Door is facing the outside of the building.", FailureType.INVALID_INPUT
            )

        if not await self.position_checker.is_position_available(outward_x, outward_y, floor, None):
            logger.error("Door is facing a room, passage or elevator.")
            return Result.fail(
                "Door is facing a room, passage or elevator.", FailureType.INVALID_INPUT
            )

        return Result.ok(True)
