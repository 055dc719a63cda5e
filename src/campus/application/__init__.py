"""Application layer - use cases and orchestration."""

from .dtos import (
    CoordinatesInput,
    DoorPositionInput,
    PassageEditInput,
    PassageInput,
    PassageOutput,
    PassagePointEditInput,
    PassagePointInput,
)
from .services import DoorService, FloorService, PassageService

__all__ = [
    "CoordinatesInput",
    "DoorPositionInput",
    "DoorService",
    "FloorService",
    "PassageEditInput",
    "PassageInput",
    "PassageOutput",
    "PassagePointEditInput",
    "PassagePointInput",
    "PassageService",
]
