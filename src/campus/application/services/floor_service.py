"""Floor queries that depend on passage data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from campus.domain.results import FailureType, Result

from ..mappers import FloorMap

if TYPE_CHECKING:
    from campus.contracts.protocols import BuildingRepositoryProtocol, FloorRepositoryProtocol

    from ..dtos import FloorOutput

logger = logging.getLogger(__name__)

__all__ = ["FloorService"]


class FloorService:
    """Lists floors of a building by their passage connections."""

    def __init__(
        self,
        floor_repo: FloorRepositoryProtocol,
        building_repo: BuildingRepositoryProtocol,
    ) -> None:
        self.floor_repo = floor_repo
        self.building_repo = building_repo

    async def list_floors_with_passage(self, building_id: str) -> Result[list[FloorOutput]]:
        """Return the floors of a building that are an end of some passage.

        Returns:
            Result holding the floors, or ENTITY_DOES_NOT_EXIST when the
            building is unknown.
        """
        try:
            if await self.building_repo.find_by_domain_id(building_id) is None:
                return Result.fail(
                    "The building does not exist.", FailureType.ENTITY_DOES_NOT_EXIST
                )
            floors = await self.floor_repo.find_with_passage_by_building(building_id)
            return Result.ok([FloorMap.to_dto(floor) for floor in floors])
        except Exception as e:
            logger.exception(f"Unexpected error while listing floors: {e}")
            return Result.fail(str(e), FailureType.DATABASE_ERROR)
