"""Unit tests for PassageService workflows.

Tests run against the in-memory repositories seeded by the ``factory``
fixture (buildings A 5x10 and B 8x12, floors A1, A2, B1, B2). A third
building C (6x6, floor C1) is added where a test needs one.
"""

from __future__ import annotations

import pytest

from campus.application.dtos import (
    CoordinatesInput,
    PassageEditInput,
    PassageInput,
    PassagePointEditInput,
    PassagePointInput,
)
from campus.application.factory import ServiceFactory
from campus.application.mappers import BuildingMap, FloorMap
from campus.application.services import PassageService
from campus.domain.entities import Building, Floor
from campus.domain.results import FailureType
from campus.domain.value_objects import BuildingCode, BuildingDimensions, FloorNumber


def point(floor_id: str, x1: int, y1: int, x2: int, y2: int) -> PassagePointInput:
    return PassagePointInput(
        floor_id=floor_id,
        first_coordinates=CoordinatesInput(x1, y1),
        last_coordinates=CoordinatesInput(x2, y2),
    )


def edit_point(
    floor_id: str | None = None,
    first: tuple[int, int] | None = None,
    last: tuple[int, int] | None = None,
) -> PassagePointEditInput:
    return PassagePointEditInput(
        floor_id=floor_id,
        first_coordinates=CoordinatesInput(*first) if first else None,
        last_coordinates=CoordinatesInput(*last) if last else None,
    )


# A1 east wall to B1 west wall
A1_TO_B1 = PassageInput(
    domain_id="p1",
    passage_start_point=point("floor-a1", 4, 3, 4, 4),
    passage_end_point=point("floor-b1", 0, 3, 0, 4),
)


@pytest.fixture
def service(factory: ServiceFactory) -> PassageService:
    return factory.get_passage_service()


@pytest.fixture
def with_building_c(factory: ServiceFactory) -> ServiceFactory:
    """Add building C (6x6) with floor C1 to the seeded store."""
    building_c = Building(
        domain_id="building-c", code=BuildingCode("C"), dimensions=BuildingDimensions(6, 6)
    )
    floor_c1 = Floor(domain_id="floor-c1", building=building_c, floor_number=FloorNumber(1))
    store = factory.get_document_store()
    store.upsert("buildings", BuildingMap.to_persistence(building_c))
    store.upsert("floors", FloorMap.to_persistence(floor_c1))
    return factory


class RaisingPassageRepository:
    """Passage repository whose lookups raise the given exception."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def find_by_domain_id(self, passage_id: str):
        raise self.error

    async def find_all(self):
        raise self.error


def raising_service(factory: ServiceFactory, error: Exception) -> PassageService:
    return PassageService(
        passage_repo=RaisingPassageRepository(error),  # type: ignore[arg-type]
        floor_repo=factory.get_floor_repository(),
        building_repo=factory.get_building_repository(),
        position_checker=factory.get_position_checker(),
    )


class TestCreatePassage:
    """Tests for PassageService.create_passage."""

    @pytest.mark.asyncio
    async def test_create_success(self, service: PassageService, factory: ServiceFactory) -> None:
        result = await service.create_passage(A1_TO_B1)
        assert result.is_success
        output = result.get_value()
        assert output.domain_id == "p1"
        assert output.passage_start_point.floor.domain_id == "floor-a1"
        assert output.passage_start_point.floor.building.building_code == "A"
        assert output.passage_end_point.first_coordinates.x == 0
        assert output.passage_end_point.last_coordinates.y == 4
        assert factory.get_document_store().get("passages", "p1") is not None

    @pytest.mark.asyncio
    async def test_duplicate_id(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.create_passage(A1_TO_B1)
        assert result.error == "Passage already exists."
        assert result.failure_type == FailureType.ENTITY_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_start_floor_not_found(self, service: PassageService) -> None:
        result = await service.create_passage(
            PassageInput("p1", point("nope", 4, 3, 4, 4), point("floor-b1", 0, 3, 0, 4))
        )
        assert result.error == "Start Point Floor not found."
        assert result.failure_type == FailureType.ENTITY_DOES_NOT_EXIST

    @pytest.mark.asyncio
    async def test_end_floor_not_found(self, service: PassageService) -> None:
        result = await service.create_passage(
            PassageInput("p1", point("floor-a1", 4, 3, 4, 4), point("nope", 0, 3, 0, 4))
        )
        assert result.error == "End Point Floor not found."
        assert result.failure_type == FailureType.ENTITY_DOES_NOT_EXIST

    @pytest.mark.asyncio
    async def test_same_building(self, service: PassageService) -> None:
        result = await service.create_passage(
            PassageInput("p1", point("floor-a1", 4, 3, 4, 4), point("floor-a2", 0, 3, 0, 4))
        )
        assert result.error == "You can't create a passage between floors of the same building."
        assert result.failure_type == FailureType.INVALID_INPUT

    @pytest.mark.asyncio
    async def test_floors_already_connected(self, service: PassageService) -> None:
        """The floor pair check ignores direction."""
        await service.create_passage(A1_TO_B1)
        result = await service.create_passage(
            PassageInput("p2", point("floor-b1", 7, 3, 7, 4), point("floor-a1", 0, 3, 0, 4))
        )
        assert result.error == "Passage already exists between the selected floors."
        assert result.failure_type == FailureType.ENTITY_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_start_floor_already_linked_to_building(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.create_passage(
            PassageInput("p2", point("floor-a1", 0, 3, 0, 4), point("floor-b2", 0, 3, 0, 4))
        )
        assert result.error == "There is already a passage from the floor A1 to the building B."
        assert result.failure_type == FailureType.ENTITY_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_end_floor_already_linked_to_building(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.create_passage(
            PassageInput("p2", point("floor-a2", 4, 3, 4, 4), point("floor-b1", 0, 6, 0, 7))
        )
        assert result.error == "There is already a passage from the floor B1 to the building A."

    @pytest.mark.asyncio
    async def test_occupied_cell(self, with_building_c: ServiceFactory) -> None:
        service = with_building_c.get_passage_service()
        await service.create_passage(A1_TO_B1)
        result = await service.create_passage(
            PassageInput("p2", point("floor-a1", 4, 4, 4, 5), point("floor-c1", 0, 2, 0, 3))
        )
        assert result.error == "Coordinates (4,4) are occupied."
        assert result.failure_type == FailureType.INVALID_INPUT

    @pytest.mark.asyncio
    async def test_cells_on_other_floor_are_free(self, with_building_c: ServiceFactory) -> None:
        """Occupancy is checked per floor."""
        service = with_building_c.get_passage_service()
        await service.create_passage(A1_TO_B1)
        result = await service.create_passage(
            PassageInput("p2", point("floor-a2", 4, 3, 4, 4), point("floor-c1", 0, 2, 0, 3))
        )
        assert result.is_success

    @pytest.mark.asyncio
    async def test_interior_cells_rejected(self, service: PassageService) -> None:
        result = await service.create_passage(
            PassageInput("p1", point("floor-a1", 1, 3, 2, 3), point("floor-b1", 0, 3, 0, 4))
        )
        assert result.error == "Coordinates must be in the border of the floor."
        assert result.failure_type == FailureType.INVALID_INPUT

    @pytest.mark.asyncio
    async def test_negative_coordinates_rejected(self, service: PassageService) -> None:
        result = await service.create_passage(
            PassageInput("p1", point("floor-a1", 4, 3, 4, 4), point("floor-b1", 0, -1, 0, 0))
        )
        assert result.error == "Coordinates must be positive numbers."

    @pytest.mark.asyncio
    async def test_rejected_passage_is_not_saved(
        self, service: PassageService, factory: ServiceFactory
    ) -> None:
        await service.create_passage(
            PassageInput("p1", point("floor-a1", 1, 3, 2, 3), point("floor-b1", 0, 3, 0, 4))
        )
        assert factory.get_document_store().count("passages") == 0

    @pytest.mark.asyncio
    async def test_unexpected_error_is_database_error(self, factory: ServiceFactory) -> None:
        service = raising_service(factory, RuntimeError("connection lost"))
        result = await service.create_passage(A1_TO_B1)
        assert result.error == "connection lost"
        assert result.failure_type == FailureType.DATABASE_ERROR

    @pytest.mark.asyncio
    async def test_type_error_is_invalid_input(self, factory: ServiceFactory) -> None:
        service = raising_service(factory, TypeError("bad payload"))
        result = await service.create_passage(A1_TO_B1)
        assert result.error == "bad payload"
        assert result.failure_type == FailureType.INVALID_INPUT


class TestEditPassage:
    """Tests for PassageService.edit_passage."""

    @pytest.mark.asyncio
    async def test_not_found(self, service: PassageService) -> None:
        result = await service.edit_passage("nope", PassageEditInput())
        assert result.error == "Passage not found."
        assert result.failure_type == FailureType.ENTITY_DOES_NOT_EXIST

    @pytest.mark.asyncio
    async def test_empty_edit_returns_current(
        self, service: PassageService, factory: ServiceFactory
    ) -> None:
        await service.create_passage(A1_TO_B1)
        before = factory.get_document_store().get("passages", "p1")
        result = await service.edit_passage("p1", PassageEditInput())
        assert result.is_success
        assert result.get_value().passage_start_point.first_coordinates.y == 3
        assert factory.get_document_store().get("passages", "p1") == before

    @pytest.mark.asyncio
    async def test_move_end_cells(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_end_point=edit_point(first=(0, 6), last=(0, 7)))
        )
        assert result.is_success
        end = result.get_value().passage_end_point
        assert (end.first_coordinates.y, end.last_coordinates.y) == (6, 7)
        stored = await service.get_passage("p1")
        assert stored.get_value().passage_end_point.first_coordinates.y == 6

    @pytest.mark.asyncio
    async def test_missing_coordinates_keep_current(self, service: PassageService) -> None:
        """Only the first cell moves; the last cell stays at (0,4)."""
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_end_point=edit_point(first=(0, 5)))
        )
        assert result.is_success
        end = result.get_value().passage_end_point
        assert (end.first_coordinates.y, end.last_coordinates.y) == (5, 4)

    @pytest.mark.asyncio
    async def test_own_cells_are_not_occupied(self, service: PassageService) -> None:
        """Re-submitting the current cells succeeds."""
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_start_point=edit_point(first=(4, 3), last=(4, 4)))
        )
        assert result.is_success

    @pytest.mark.asyncio
    async def test_move_start_floor(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_start_point=edit_point(floor_id="floor-a2"))
        )
        assert result.is_success
        assert result.get_value().passage_start_point.floor.domain_id == "floor-a2"

    @pytest.mark.asyncio
    async def test_unchanged_floor_id_is_ignored(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1",
            PassageEditInput(
                passage_start_point=edit_point(floor_id="floor-a1", first=(4, 5), last=(4, 6))
            ),
        )
        assert result.is_success

    @pytest.mark.asyncio
    async def test_new_start_floor_not_found(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_start_point=edit_point(floor_id="nope"))
        )
        assert result.error == "Start Point Floor not found."
        assert result.failure_type == FailureType.ENTITY_DOES_NOT_EXIST

    @pytest.mark.asyncio
    async def test_new_end_floor_not_found(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_end_point=edit_point(floor_id="nope"))
        )
        assert result.error == "End Point Floor not found."

    @pytest.mark.asyncio
    async def test_new_end_floor_in_start_building(
        self, service: PassageService, factory: ServiceFactory
    ) -> None:
        """The new end floor is compared against the start floor's building."""
        await service.create_passage(A1_TO_B1)
        before = factory.get_document_store().get("passages", "p1")
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_end_point=edit_point(floor_id="floor-a2"))
        )
        assert result.error == "You can't create a passage between floors of the same building."
        assert result.failure_type == FailureType.INVALID_INPUT
        assert factory.get_document_store().get("passages", "p1") == before

    @pytest.mark.asyncio
    async def test_new_start_floor_in_end_building(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_start_point=edit_point(floor_id="floor-b2"))
        )
        assert result.error == "You can't create a passage between floors of the same building."
        assert result.failure_type == FailureType.INVALID_INPUT

    @pytest.mark.asyncio
    async def test_new_end_floor_already_linked(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        await service.create_passage(
            PassageInput("p2", point("floor-a2", 4, 3, 4, 4), point("floor-b2", 0, 3, 0, 4))
        )
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_end_point=edit_point(floor_id="floor-b2"))
        )
        assert result.error == "There is already a passage from the floor B2 to the building A."
        assert result.failure_type == FailureType.ENTITY_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_occupied_by_other_passage(self, with_building_c: ServiceFactory) -> None:
        service = with_building_c.get_passage_service()
        await service.create_passage(A1_TO_B1)
        await service.create_passage(
            PassageInput("p2", point("floor-a1", 0, 3, 0, 4), point("floor-c1", 0, 2, 0, 3))
        )
        result = await service.edit_passage(
            "p2", PassageEditInput(passage_start_point=edit_point(first=(4, 4), last=(4, 5)))
        )
        assert result.error == "Coordinates (4,4) are occupied."

    @pytest.mark.asyncio
    async def test_invalid_update_is_not_saved(
        self, service: PassageService, factory: ServiceFactory
    ) -> None:
        await service.create_passage(A1_TO_B1)
        before = factory.get_document_store().get("passages", "p1")
        result = await service.edit_passage(
            "p1", PassageEditInput(passage_end_point=edit_point(first=(2, 2), last=(2, 3)))
        )
        assert result.error == "Coordinates must be in the border of the floor."
        assert result.failure_type == FailureType.INVALID_INPUT
        assert factory.get_document_store().get("passages", "p1") == before

    @pytest.mark.asyncio
    async def test_failed_end_side_discards_start_side(
        self, service: PassageService, factory: ServiceFactory
    ) -> None:
        """Nothing is saved when the second side fails."""
        await service.create_passage(A1_TO_B1)
        before = factory.get_document_store().get("passages", "p1")
        result = await service.edit_passage(
            "p1",
            PassageEditInput(
                passage_start_point=edit_point(first=(4, 6), last=(4, 7)),
                passage_end_point=edit_point(floor_id="nope"),
            ),
        )
        assert result.is_failure
        assert factory.get_document_store().get("passages", "p1") == before

    @pytest.mark.asyncio
    async def test_end_side_sees_updated_start(self, with_building_c: ServiceFactory) -> None:
        """Moving the start to C frees building A for the end side."""
        service = with_building_c.get_passage_service()
        await service.create_passage(A1_TO_B1)
        result = await service.edit_passage(
            "p1",
            PassageEditInput(
                passage_start_point=edit_point(floor_id="floor-c1", first=(5, 3), last=(5, 4)),
                passage_end_point=edit_point(floor_id="floor-a2"),
            ),
        )
        assert result.is_success
        output = result.get_value()
        assert output.passage_start_point.floor.domain_id == "floor-c1"
        assert output.passage_end_point.floor.domain_id == "floor-a2"

    @pytest.mark.asyncio
    async def test_unexpected_error(self, factory: ServiceFactory) -> None:
        service = raising_service(factory, RuntimeError("connection lost"))
        result = await service.edit_passage("p1", PassageEditInput())
        assert result.failure_type == FailureType.DATABASE_ERROR


class TestListPassages:
    """Tests for listing and reading passages."""

    @pytest.mark.asyncio
    async def test_list_empty(self, service: PassageService) -> None:
        assert (await service.list_passages()).get_value() == []

    @pytest.mark.asyncio
    async def test_list_all(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        await service.create_passage(
            PassageInput("p2", point("floor-a2", 4, 3, 4, 4), point("floor-b2", 0, 3, 0, 4))
        )
        outputs = (await service.list_passages()).get_value()
        assert [output.domain_id for output in outputs] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_between_buildings(self, with_building_c: ServiceFactory) -> None:
        service = with_building_c.get_passage_service()
        await service.create_passage(A1_TO_B1)
        await service.create_passage(
            PassageInput("p2", point("floor-a2", 4, 3, 4, 4), point("floor-c1", 0, 2, 0, 3))
        )
        result = await service.list_passages_between_buildings("building-b", "building-a")
        assert [output.domain_id for output in result.get_value()] == ["p1"]

    @pytest.mark.asyncio
    async def test_between_buildings_first_missing(self, service: PassageService) -> None:
        result = await service.list_passages_between_buildings("nope", "building-a")
        assert result.error == "First Building not found."
        assert result.failure_type == FailureType.ENTITY_DOES_NOT_EXIST

    @pytest.mark.asyncio
    async def test_between_buildings_last_missing(self, service: PassageService) -> None:
        result = await service.list_passages_between_buildings("building-a", "nope")
        assert result.error == "Last Building not found."

    @pytest.mark.asyncio
    async def test_get_passage(self, service: PassageService) -> None:
        await service.create_passage(A1_TO_B1)
        assert (await service.get_passage("p1")).get_value().domain_id == "p1"

    @pytest.mark.asyncio
    async def test_get_missing_passage(self, service: PassageService) -> None:
        result = await service.get_passage("nope")
        assert result.error == "Passage not found."
        assert result.failure_type == FailureType.ENTITY_DOES_NOT_EXIST

    @pytest.mark.asyncio
    async def test_list_unexpected_error(self, factory: ServiceFactory) -> None:
        service = raising_service(factory, RuntimeError("connection lost"))
        result = await service.list_passages()
        assert result.error == "connection lost"
        assert result.failure_type == FailureType.DATABASE_ERROR
