"""Passage workflows: creation, partial edit and listing.

Each public method returns a Result. Expected failures (missing floors,
duplicate passages, occupied cells, invalid placement) are reported as
failed results; unexpected exceptions are logged and converted at the
method boundary so callers never see a raised error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from campus.domain.passage import SAME_BUILDING_MESSAGE, Passage, PassagePoint
from campus.domain.results import FailureType, Result
from campus.domain.value_objects import as_integer

from ..dtos import CoordinatesInput, PassageEditInput, PassageInput, PassageOutput
from ..mappers import PassageMap

if TYPE_CHECKING:
    from campus.contracts.protocols import (
        BuildingRepositoryProtocol,
        FloorRepositoryProtocol,
        PassageRepositoryProtocol,
        PositionCheckerProtocol,
    )
    from campus.domain.entities import Floor

    from ..dtos import PassagePointEditInput

logger = logging.getLogger(__name__)

__all__ = ["PassageService"]


def _existing_link_message(floor: Floor, other_floor: Floor) -> str:
    return (
        f"There is already a passage from the floor {floor.label} "
        f"to the building {other_floor.building.code.value}."
    )


def _occupied_message(coordinates: CoordinatesInput) -> str:
    x = as_integer(coordinates.x)
    y = as_integer(coordinates.y)
    x_label = coordinates.x if x is None else x
    y_label = coordinates.y if y is None else y
    return f"Coordinates ({x_label},{y_label}) are occupied."


def _unexpected_failure(action: str, error: Exception) -> Result:
    """Convert an unexpected exception raised inside a workflow."""
    logger.exception(f"Unexpected error while {action}: {error}")
    if isinstance(error, (TypeError, ValueError)):
        return Result.fail(str(error), FailureType.INVALID_INPUT)
    return Result.fail(str(error), FailureType.DATABASE_ERROR)


class PassageService:
    """Application service for passages between buildings.

    Attributes:
        passage_repo: Passage storage and queries.
        floor_repo: Floor lookup.
        building_repo: Building lookup.
        position_checker: Occupancy oracle consulted before placing a passage.
    """

    def __init__(
        self,
        passage_repo: PassageRepositoryProtocol,
        floor_repo: FloorRepositoryProtocol,
        building_repo: BuildingRepositoryProtocol,
        position_checker: PositionCheckerProtocol,
    ) -> None:
        self.passage_repo = passage_repo
        self.floor_repo = floor_repo
        self.building_repo = building_repo
        self.position_checker = position_checker

    async def create_passage(self, dto: PassageInput) -> Result[PassageOutput]:
        """Create and persist a new passage.

        Checks run in a fixed order and the first failing one decides the
        result: identity, floor existence, existing passage between the
        floors, same building, one passage per floor and building pair,
        cell occupancy, and finally the domain placement rules.

        Args:
            dto: Passage identity and both end points.

        Returns:
            Result holding the created passage DTO.
        """
        try:
            if await self.passage_repo.find_by_domain_id(dto.domain_id) is not None:
                return Result.fail("Passage already exists.", FailureType.ENTITY_ALREADY_EXISTS)

            start_input = dto.passage_start_point
            end_input = dto.passage_end_point

            start_floor = await self.floor_repo.find_by_domain_id(start_input.floor_id)
            if start_floor is None:
                return Result.fail(
                    "Start Point Floor not found.", FailureType.ENTITY_DOES_NOT_EXIST
                )
            end_floor = await self.floor_repo.find_by_domain_id(end_input.floor_id)
            if end_floor is None:
                return Result.fail(
                    "End Point Floor not found.", FailureType.ENTITY_DOES_NOT_EXIST
                )

            if await self.passage_repo.find_by_floors(start_floor, end_floor) is not None:
                return Result.fail(
                    "Passage already exists between the selected floors.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )

            if start_floor.is_in_same_building(end_floor):
                return Result.fail(SAME_BUILDING_MESSAGE, FailureType.INVALID_INPUT)

            for floor, other_floor in ((start_floor, end_floor), (end_floor, start_floor)):
                if await self.passage_repo.is_there_passage_between_floor_and_building(
                    floor.domain_id, other_floor.building.domain_id
                ):
                    return Result.fail(
                        _existing_link_message(floor, other_floor),
                        FailureType.ENTITY_ALREADY_EXISTS,
                    )

            cells = [
                (start_input.first_coordinates, start_floor),
                (start_input.last_coordinates, start_floor),
                (end_input.first_coordinates, end_floor),
                (end_input.last_coordinates, end_floor),
            ]
            for coordinates, floor in cells:
                if not await self.position_checker.is_position_available(
                    coordinates.x, coordinates.y, floor, None
                ):
                    return Result.fail(_occupied_message(coordinates), FailureType.INVALID_INPUT)

            start_or_error = PassagePoint.from_values(
                start_floor,
                start_input.first_coordinates.x,
                start_input.first_coordinates.y,
                start_input.last_coordinates.x,
                start_input.last_coordinates.y,
            )
            if start_or_error.is_failure:
                return Result.fail(start_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]
            end_or_error = PassagePoint.from_values(
                end_floor,
                end_input.first_coordinates.x,
                end_input.first_coordinates.y,
                end_input.last_coordinates.x,
                end_input.last_coordinates.y,
            )
            if end_or_error.is_failure:
                return Result.fail(end_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]

            passage_or_error = Passage.create(
                start_or_error.get_value(), end_or_error.get_value(), dto.domain_id
            )
            if passage_or_error.is_failure:
                return Result.fail(passage_or_error.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]

            passage = await self.passage_repo.save(passage_or_error.get_value())
            logger.debug(
                f"Created passage {passage.domain_id} between "
                f"{start_floor.label} and {end_floor.label}"
            )
            return Result.ok(PassageMap.to_dto(passage))
        except Exception as e:
            return _unexpected_failure("creating passage", e)

    async def edit_passage(
        self, passage_id: str, dto: PassageEditInput
    ) -> Result[PassageOutput]:
        """Apply a partial update to an existing passage.

        The start side is applied before the end side, so end side checks
        see the already updated start point. Nothing is saved unless both
        sides succeed.

        Args:
            passage_id: Identity of the passage to edit.
            dto: Sides to update; omitted fields keep their current value.

        Returns:
            Result holding the updated passage DTO.
        """
        try:
            passage = await self.passage_repo.find_by_domain_id(passage_id)
            if passage is None:
                return Result.fail("Passage not found.", FailureType.ENTITY_DOES_NOT_EXIST)

            if dto.is_empty:
                return Result.ok(PassageMap.to_dto(passage))

            if dto.passage_start_point is not None:
                result = await self._update_side(passage, dto.passage_start_point, start=True)
                if result.is_failure:
                    return Result.fail(result.error, result.failure_type)  # type: ignore[arg-type]

            if dto.passage_end_point is not None:
                result = await self._update_side(passage, dto.passage_end_point, start=False)
                if result.is_failure:
                    return Result.fail(result.error, result.failure_type)  # type: ignore[arg-type]

            passage = await self.passage_repo.save(passage)
            logger.debug(f"Updated passage {passage.domain_id}")
            return Result.ok(PassageMap.to_dto(passage))
        except Exception as e:
            return _unexpected_failure("editing passage", e)

    async def _update_side(
        self, passage: Passage, side: PassagePointEditInput, start: bool
    ) -> Result[None]:
        current = passage.start_point if start else passage.end_point
        other = passage.end_point if start else passage.start_point
        label = "Start" if start else "End"

        floor = current.floor
        if side.floor_id and side.floor_id != current.floor.domain_id:
            new_floor = await self.floor_repo.find_by_domain_id(side.floor_id)
            if new_floor is None:
                return Result.fail(
                    f"{label} Point Floor not found.", FailureType.ENTITY_DOES_NOT_EXIST
                )
            if new_floor.is_in_same_building(other.floor):
                return Result.fail(SAME_BUILDING_MESSAGE, FailureType.INVALID_INPUT)
            if await self.passage_repo.is_there_passage_between_floor_and_building(
                new_floor.domain_id, other.floor.building.domain_id
            ):
                return Result.fail(
                    _existing_link_message(new_floor, other.floor),
                    FailureType.ENTITY_ALREADY_EXISTS,
                )
            if await self.passage_repo.find_by_floors(new_floor, other.floor) is not None:
                return Result.fail(
                    "Passage already exists between the selected floors.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )
            floor = new_floor

        first = side.first_coordinates or CoordinatesInput(
            current.first_coordinates.x, current.first_coordinates.y
        )
        last = side.last_coordinates or CoordinatesInput(
            current.last_coordinates.x, current.last_coordinates.y
        )

        for coordinates in (first, last):
            if not await self.position_checker.is_position_available(
                coordinates.x, coordinates.y, floor, passage.domain_id
            ):
                return Result.fail(_occupied_message(coordinates), FailureType.INVALID_INPUT)

        update = passage.update_start_point if start else passage.update_end_point
        result = update(floor, first.x, first.y, last.x, last.y)
        if result.is_failure:
            return Result.fail(result.error, FailureType.INVALID_INPUT)  # type: ignore[arg-type]
        return Result.ok()

    async def get_passage(self, passage_id: str) -> Result[PassageOutput]:
        """Return a single passage by id."""
        try:
            passage = await self.passage_repo.find_by_domain_id(passage_id)
            if passage is None:
                return Result.fail("Passage not found.", FailureType.ENTITY_DOES_NOT_EXIST)
            return Result.ok(PassageMap.to_dto(passage))
        except Exception as e:
            logger.exception(f"Unexpected error while reading passage: {e}")
            return Result.fail(str(e), FailureType.DATABASE_ERROR)

    async def list_passages(self) -> Result[list[PassageOutput]]:
        """Return every stored passage."""
        try:
            passages = await self.passage_repo.find_all()
            return Result.ok([PassageMap.to_dto(passage) for passage in passages])
        except Exception as e:
            logger.exception(f"Unexpected error while listing passages: {e}")
            return Result.fail(str(e), FailureType.DATABASE_ERROR)

    async def list_passages_between_buildings(
        self, first_building_id: str, last_building_id: str
    ) -> Result[list[PassageOutput]]:
        """Return passages with one end in each of the two buildings.

        Args:
            first_building_id: Identity of one building.
            last_building_id: Identity of the other building.

        Returns:
            Result holding the matching passages, in either direction.
        """
        try:
            if await self.building_repo.find_by_domain_id(first_building_id) is None:
                return Result.fail("First Building not found.", FailureType.ENTITY_DOES_NOT_EXIST)
            if await self.building_repo.find_by_domain_id(last_building_id) is None:
                return Result.fail("Last Building not found.", FailureType.ENTITY_DOES_NOT_EXIST)

            passages = await self.passage_repo.find_passages_between_buildings(
                first_building_id, last_building_id
            )
            return Result.ok([PassageMap.to_dto(passage) for passage in passages])
        except Exception as e:
            logger.exception(f"Unexpected error while listing passages: {e}")
            return Result.fail(str(e), FailureType.DATABASE_ERROR)
