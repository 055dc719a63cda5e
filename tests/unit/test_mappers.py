"""Unit tests for the domain/document/DTO mappers."""

from __future__ import annotations

import pytest

from campus.application.mappers import BuildingMap, FloorMap, PassageMap
from campus.domain.entities import Building, Floor
from campus.domain.passage import Passage, PassagePoint
from campus.domain.value_objects import (
    BuildingCode,
    BuildingDimensions,
    Coordinates,
    FloorNumber,
)


@pytest.fixture
def passage(floor_a1: Floor, floor_b1: Floor) -> Passage:
    start = PassagePoint.create(floor_a1, Coordinates(4, 3), Coordinates(4, 4)).get_value()
    end = PassagePoint.create(floor_b1, Coordinates(0, 3), Coordinates(0, 4)).get_value()
    return Passage.create(start, end, "p1").get_value()


class TestBuildingMap:
    """Tests for BuildingMap."""

    def test_to_persistence_omits_missing_optionals(self, building_a: Building) -> None:
        assert BuildingMap.to_persistence(building_a) == {
            "domainId": "building-a",
            "buildingCode": "A",
            "buildingDimensions": {"width": 5, "length": 10},
        }

    def test_round_trip_with_name(self) -> None:
        building = Building(
            domain_id="b-1",
            code=BuildingCode("MAIN"),
            dimensions=BuildingDimensions(6, 7),
            name="Main building",
            description="Library",
        )
        restored = BuildingMap.to_domain(BuildingMap.to_persistence(building))
        assert restored == building

    def test_to_dto(self, building_b: Building) -> None:
        dto = BuildingMap.to_dto(building_b)
        assert dto.building_code == "B"
        assert (dto.width, dto.length) == (8, 12)
        assert dto.building_name is None

    def test_invalid_dimensions_raise(self) -> None:
        raw = {
            "domainId": "b-1",
            "buildingCode": "A",
            "buildingDimensions": {"width": 0, "length": 3},
        }
        with pytest.raises(ValueError):
            BuildingMap.to_domain(raw)


class TestFloorMap:
    """Tests for FloorMap."""

    def test_to_persistence(self, building_a: Building) -> None:
        floor = Floor(
            domain_id="f-1",
            building=building_a,
            floor_number=FloorNumber(-1),
            description="Basement",
        )
        assert FloorMap.to_persistence(floor) == {
            "domainId": "f-1",
            "buildingId": "building-a",
            "floorNumber": -1,
            "floorDescription": "Basement",
        }

    def test_to_domain_uses_given_building(
        self, floor_a2: Floor, building_a: Building
    ) -> None:
        restored = FloorMap.to_domain(FloorMap.to_persistence(floor_a2), building_a)
        assert restored.building is building_a
        assert restored.floor_number.value == 2

    def test_to_dto_embeds_building(self, floor_b2: Floor) -> None:
        dto = FloorMap.to_dto(floor_b2)
        assert dto.floor_number == 2
        assert dto.building.domain_id == "building-b"


class TestPassageMap:
    """Tests for PassageMap."""

    def test_to_domain(self, passage: Passage, floor_a1: Floor, floor_b1: Floor) -> None:
        restored = PassageMap.to_domain(PassageMap.to_persistence(passage), floor_a1, floor_b1)
        assert restored.domain_id == "p1"
        assert restored.start_point.last_coordinates == Coordinates(4, 4)
        assert restored.end_point.floor is floor_b1

    def test_to_dto(self, passage: Passage) -> None:
        dto = PassageMap.to_dto(passage)
        assert dto.domain_id == "p1"
        assert dto.passage_start_point.floor.building.building_code == "A"
        first = dto.passage_end_point.first_coordinates
        assert (first.x, first.y) == (0, 3)

    def test_stored_document_breaking_rules_raises(
        self, passage: Passage, floor_a1: Floor, floor_b1: Floor
    ) -> None:
        """Documents whose cells left the border are rejected on load."""
        raw = PassageMap.to_persistence(passage)
        raw["passageEndPoint"]["firstCoordinates"] = {"x": 2, "y": 3}
        raw["passageEndPoint"]["lastCoordinates"] = {"x": 2, "y": 4}
        with pytest.raises(ValueError, match="border"):
            PassageMap.to_domain(raw, floor_a1, floor_b1)
