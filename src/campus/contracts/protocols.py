"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
Repository implementations and the occupancy oracle depend on these protocols,
enabling the passage workflows to be tested with simple fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from campus.domain.entities import Building, Floor
    from campus.domain.passage import Passage


class BuildingRepositoryProtocol(Protocol):
    """Protocol for building lookup and storage."""

    async def find_by_domain_id(self, building_id: str) -> Building | None:
        """Return the building with the given id, or None."""
        ...

    async def find_all(self) -> list[Building]:
        """Return every stored building."""
        ...

    async def save(self, building: Building) -> Building:
        """Insert or update a building."""
        ...


class FloorRepositoryProtocol(Protocol):
    """Protocol for floor lookup and storage.

    Returned floors carry their owning building, already resolved.
    """

    async def find_by_domain_id(self, floor_id: str) -> Floor | None:
        """Return the floor with the given id, or None."""
        ...

    async def find_by_building(self, building_id: str) -> list[Floor]:
        """Return the floors of a building."""
        ...

    async def find_with_passage_by_building(self, building_id: str) -> list[Floor]:
        """Return the floors of a building that have at least one passage."""
        ...

    async def save(self, floor: Floor) -> Floor:
        """Insert or update a floor."""
        ...


class PassageRepositoryProtocol(Protocol):
    """Protocol for passage queries and storage."""

    async def find_by_domain_id(self, passage_id: str) -> Passage | None:
        """Return the passage with the given id, or None."""
        ...

    async def find_by_floors(self, first_floor: Floor, second_floor: Floor) -> Passage | None:
        """Return a passage joining the two floors in either direction, or None."""
        ...

    async def is_there_passage_between_floor_and_building(
        self, floor_id: str, building_id: str
    ) -> bool:
        """Check if the floor has any passage touching the given building."""
        ...

    async def is_there_a_passage_in_floor_coordinates(
        self, x: int, y: int, floor_id: str, exclude_passage_id: str | None
    ) -> bool:
        """Check if a passage other than exclude_passage_id occupies the cell."""
        ...

    async def find_passages_between_buildings(
        self, first_building_id: str, last_building_id: str
    ) -> list[Passage]:
        """Return passages with one end in each building, in either order."""
        ...

    async def find_all(self) -> list[Passage]:
        """Return every stored passage."""
        ...

    async def save(self, passage: Passage) -> Passage:
        """Insert or update a passage."""
        ...


@runtime_checkable
class PositionCheckerProtocol(Protocol):
    """Protocol for the floor occupancy oracle.

    Implementations answer whether a cell is free of rooms, elevators and
    passages. ``exclude_id`` lets an entity being edited ignore its own
    current placement.
    """

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        """Return True if nothing occupies the cell on the floor."""
        ...
