"""Door placement check exposed to the web and CLI layers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from campus.domain.results import FailureType, Result

if TYPE_CHECKING:
    from campus.contracts.protocols import FloorRepositoryProtocol
    from campus.domain.services import DoorPositionChecker

    from ..dtos import DoorPositionInput

logger = logging.getLogger(__name__)

__all__ = ["DoorService"]


class DoorService:
    """Resolves the floor of a door request and runs the door checker."""

    def __init__(
        self, floor_repo: FloorRepositoryProtocol, door_checker: DoorPositionChecker
    ) -> None:
        self.floor_repo = floor_repo
        self.door_checker = door_checker

    async def validate_door(self, dto: DoorPositionInput) -> Result[bool]:
        """Check a door placement on one floor.

        Returns:
            Result.ok(True) for a valid door, ENTITY_DOES_NOT_EXIST when the
            floor is unknown, otherwise the checker's failure.
        """
        try:
            floor = await self.floor_repo.find_by_domain_id(dto.floor_id)
            if floor is None:
                return Result.fail("Floor not found.", FailureType.ENTITY_DOES_NOT_EXIST)
            return await self.door_checker.is_position_valid(
                dto.initial_x,
                dto.initial_y,
                dto.final_x,
                dto.final_y,
                dto.door_x,
                dto.door_y,
                dto.door_orientation,
                floor,
            )
        except Exception as e:
            logger.exception(f"Unexpected error while validating door: {e}")
            return Result.fail(str(e), FailureType.DATABASE_ERROR)
