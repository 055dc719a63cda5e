"""Pytest configuration and shared fixtures for campus tests."""

from __future__ import annotations

import pytest

from campus.application.factory import ServiceFactory
from campus.application.mappers import BuildingMap, FloorMap
from campus.domain.entities import Building, Floor
from campus.domain.value_objects import BuildingCode, BuildingDimensions, FloorNumber


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Campus fixtures
# =============================================================================


def make_building(domain_id: str, code: str, width: int, length: int) -> Building:
    """Build a valid Building without going through a repository."""
    return Building(
        domain_id=domain_id,
        code=BuildingCode(code),
        dimensions=BuildingDimensions(width, length),
    )


def make_floor(domain_id: str, building: Building, number: int) -> Floor:
    """Build a valid Floor without going through a repository."""
    return Floor(domain_id=domain_id, building=building, floor_number=FloorNumber(number))


@pytest.fixture
def building_a() -> Building:
    """Building A, 5 columns by 10 rows."""
    return make_building("building-a", "A", 5, 10)


@pytest.fixture
def building_b() -> Building:
    """Building B, 8 columns by 12 rows."""
    return make_building("building-b", "B", 8, 12)


@pytest.fixture
def floor_a1(building_a: Building) -> Floor:
    return make_floor("floor-a1", building_a, 1)


@pytest.fixture
def floor_a2(building_a: Building) -> Floor:
    return make_floor("floor-a2", building_a, 2)


@pytest.fixture
def floor_b1(building_b: Building) -> Floor:
    return make_floor("floor-b1", building_b, 1)


@pytest.fixture
def floor_b2(building_b: Building) -> Floor:
    return make_floor("floor-b2", building_b, 2)


@pytest.fixture
def factory(
    building_a: Building,
    building_b: Building,
    floor_a1: Floor,
    floor_a2: Floor,
    floor_b1: Floor,
    floor_b2: Floor,
) -> ServiceFactory:
    """A ServiceFactory whose store holds buildings A and B with two floors each."""
    factory = ServiceFactory()
    store = factory.get_document_store()
    for building in (building_a, building_b):
        store.upsert("buildings", BuildingMap.to_persistence(building))
    for floor in (floor_a1, floor_a2, floor_b1, floor_b2):
        store.upsert("floors", FloorMap.to_persistence(floor))
    return factory
