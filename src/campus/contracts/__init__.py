"""Contracts shared between the application and infrastructure layers."""

from campus.contracts.protocols import (
    BuildingRepositoryProtocol,
    FloorRepositoryProtocol,
    PassageRepositoryProtocol,
    PositionCheckerProtocol,
)

__all__ = [
    "BuildingRepositoryProtocol",
    "FloorRepositoryProtocol",
    "PassageRepositoryProtocol",
    "PositionCheckerProtocol",
]
