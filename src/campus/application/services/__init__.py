"""Application services orchestrating the domain workflows."""

from .door_service import DoorService
from .floor_service import FloorService
from .passage_service import PassageService

__all__ = ["DoorService", "FloorService", "PassageService"]
