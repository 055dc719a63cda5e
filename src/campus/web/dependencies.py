"""FastAPI dependency injection for campus services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from campus.application.factory import ServiceFactory, get_factory
from campus.application.services import DoorService, FloorService, PassageService


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_passage_service(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PassageService:
    """Dependency for PassageService."""
    return factory.get_passage_service()


def get_door_service(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> DoorService:
    """Dependency for DoorService."""
    return factory.get_door_service()


def get_floor_service(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> FloorService:
    """Dependency for FloorService."""
    return factory.get_floor_service()


# Type aliases for cleaner endpoint signatures
PassageServiceDep = Annotated[PassageService, Depends(get_passage_service)]
DoorServiceDep = Annotated[DoorService, Depends(get_door_service)]
FloorServiceDep = Annotated[FloorService, Depends(get_floor_service)]
