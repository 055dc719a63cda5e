"""Occupancy checks for floor cells.

``PositionChecker`` is the oracle the passage workflows and the door
checker consult. It combines one checker per kind of occupant; a cell is
available only when every checker agrees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from campus.contracts.protocols import (
        PassageRepositoryProtocol,
        PositionCheckerProtocol,
    )

    from ..entities import Floor

__all__ = ["PassagePositionChecker", "PositionChecker"]


class PassagePositionChecker:
    """Reports a cell as taken when a passage end covers it."""

    def __init__(self, passage_repo: PassageRepositoryProtocol) -> None:
        self.passage_repo = passage_repo

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        occupied = await self.passage_repo.is_there_a_passage_in_floor_coordinates(
            x, y, floor.domain_id, exclude_id
        )
        return not occupied


class PositionChecker:
    """Composite occupancy oracle.

    Checkers are consulted in order and the scan stops at the first one
    reporting the cell as taken.

    Attributes:
        checkers: Occupancy checkers for rooms, elevators, passages, etc.
    """

    def __init__(self, checkers: Sequence[PositionCheckerProtocol]) -> None:
        self.checkers = list(checkers)

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        for checker in self.checkers:
            if not await checker.is_position_available(x, y, floor, exclude_id):
                return False
        return True
