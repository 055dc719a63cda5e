"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from campus.application.services import DoorService, FloorService, PassageService
    from campus.domain.services import DoorPositionChecker, PositionChecker
    from campus.infrastructure import (
        BuildingRepository,
        DocumentStore,
        FloorRepository,
        PassageRepository,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation to support:
    - Dependency injection for testing
    - A single shared document store per factory
    - Lazy initialization of repositories and services

    Every getter returns the same instance on repeated calls, so services
    created from one factory share their repositories and store.

    Example:
        ```python
        factory = ServiceFactory()
        result = await factory.get_passage_service().list_passages()
        ```
    """

    _store: "DocumentStore | None" = field(default=None, init=False, repr=False)
    _building_repository: "BuildingRepository | None" = field(
        default=None, init=False, repr=False
    )
    _floor_repository: "FloorRepository | None" = field(
        default=None, init=False, repr=False
    )
    _passage_repository: "PassageRepository | None" = field(
        default=None, init=False, repr=False
    )
    _position_checker: "PositionChecker | None" = field(
        default=None, init=False, repr=False
    )
    _door_position_checker: "DoorPositionChecker | None" = field(
        default=None, init=False, repr=False
    )
    _passage_service: "PassageService | None" = field(
        default=None, init=False, repr=False
    )
    _door_service: "DoorService | None" = field(default=None, init=False, repr=False)
    _floor_service: "FloorService | None" = field(default=None, init=False, repr=False)

    def get_document_store(self) -> "DocumentStore":
        """Get or create the document store."""
        if self._store is None:
            from campus.infrastructure import DocumentStore

            self._store = DocumentStore()
        return self._store

    def get_building_repository(self) -> "BuildingRepository":
        """Get or create the building repository."""
        if self._building_repository is None:
            from campus.infrastructure import BuildingRepository

            self._building_repository = BuildingRepository(self.get_document_store())
        return self._building_repository

    def get_floor_repository(self) -> "FloorRepository":
        """Get or create the floor repository."""
        if self._floor_repository is None:
            from campus.infrastructure import FloorRepository

            self._floor_repository = FloorRepository(
                self.get_document_store(), self.get_building_repository()
            )
        return self._floor_repository

    def get_passage_repository(self) -> "PassageRepository":
        """Get or create the passage repository."""
        if self._passage_repository is None:
            from campus.infrastructure import PassageRepository

            self._passage_repository = PassageRepository(
                self.get_document_store(), self.get_floor_repository()
            )
        return self._passage_repository

    def get_position_checker(self) -> "PositionChecker":
        """Get or create the floor occupancy oracle.

        Only passages are registered; room and elevator checkers would be
        appended to the same list.
        """
        if self._position_checker is None:
            from campus.domain.services import PassagePositionChecker, PositionChecker

            self._position_checker = PositionChecker(
                [PassagePositionChecker(self.get_passage_repository())]
            )
        return self._position_checker

    def get_door_position_checker(self) -> "DoorPositionChecker":
        """Get or create the door position checker."""
        if self._door_position_checker is None:
            from campus.domain.services import DoorPositionChecker

            self._door_position_checker = DoorPositionChecker(
                self.get_position_checker(), self.get_building_repository()
            )
        return self._door_position_checker

    def get_passage_service(self) -> "PassageService":
        """Get or create the passage service."""
        if self._passage_service is None:
            from campus.application.services import PassageService

            self._passage_service = PassageService(
                passage_repo=self.get_passage_repository(),
                floor_repo=self.get_floor_repository(),
                building_repo=self.get_building_repository(),
                position_checker=self.get_position_checker(),
            )
        return self._passage_service

    def get_door_service(self) -> "DoorService":
        """Get or create the door service."""
        if self._door_service is None:
            from campus.application.services import DoorService

            self._door_service = DoorService(
                self.get_floor_repository(), self.get_door_position_checker()
            )
        return self._door_service

    def get_floor_service(self) -> "FloorService":
        """Get or create the floor service."""
        if self._floor_service is None:
            from campus.application.services import FloorService

            self._floor_service = FloorService(
                self.get_floor_repository(), self.get_building_repository()
            )
        return self._floor_service


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
