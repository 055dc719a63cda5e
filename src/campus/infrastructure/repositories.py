"""Repositories backed by the in-memory document store.

Each repository stores documents in its own collection and rebuilds domain
objects through the mappers on every read, so the objects handed out are
never shared with the store. Passages and floors resolve their references
(floors, buildings) through the sibling repositories.
"""

from __future__ import annotations

import logging
from typing import Any

from campus.application.mappers import BuildingMap, FloorMap, PassageMap
from campus.domain.entities import Building, Floor
from campus.domain.passage import Passage

from .document_store import Document, DocumentStore

logger = logging.getLogger(__name__)

BUILDINGS = "buildings"
FLOORS = "floors"
PASSAGES = "passages"

_SIDES = ("passageStartPoint", "passageEndPoint")

__all__ = ["BuildingRepository", "FloorRepository", "PassageRepository"]


class BuildingRepository:
    """Building storage."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def find_by_domain_id(self, building_id: str) -> Building | None:
        document = self.store.get(BUILDINGS, building_id)
        return BuildingMap.to_domain(document) if document is not None else None

    async def find_all(self) -> list[Building]:
        return [BuildingMap.to_domain(document) for document in self.store.find(BUILDINGS)]

    async def save(self, building: Building) -> Building:
        self.store.upsert(BUILDINGS, BuildingMap.to_persistence(building))
        return building


class FloorRepository:
    """Floor storage. Floors are returned with their building resolved."""

    def __init__(self, store: DocumentStore, building_repo: BuildingRepository) -> None:
        self.store = store
        self.building_repo = building_repo

    async def _to_domain(self, document: Document) -> Floor:
        building = await self.building_repo.find_by_domain_id(document["buildingId"])
        if building is None:
            raise ValueError(
                f"Floor {document['domainId']} references missing building "
                f"{document['buildingId']}"
            )
        return FloorMap.to_domain(document, building)

    async def find_by_domain_id(self, floor_id: str) -> Floor | None:
        document = self.store.get(FLOORS, floor_id)
        return await self._to_domain(document) if document is not None else None

    async def find_by_building(self, building_id: str) -> list[Floor]:
        documents = self.store.find(FLOORS, lambda doc: doc["buildingId"] == building_id)
        return [await self._to_domain(document) for document in documents]

    async def find_with_passage_by_building(self, building_id: str) -> list[Floor]:
        linked = {
            _floor_id(document, side) for document in self.store.find(PASSAGES) for side in _SIDES
        }
        documents = self.store.find(
            FLOORS,
            lambda doc: doc["buildingId"] == building_id and doc["domainId"] in linked,
        )
        return [await self._to_domain(document) for document in documents]

    async def save(self, floor: Floor) -> Floor:
        self.store.upsert(FLOORS, FloorMap.to_persistence(floor))
        return floor


def _floor_id(document: Document, side: str) -> str:
    return document[side]["floorId"]


def _covers_cell(point: dict[str, Any], x: int, y: int) -> bool:
    return any(
        point[key]["x"] == x and point[key]["y"] == y
        for key in ("firstCoordinates", "lastCoordinates")
    )


class PassageRepository:
    """Passage storage and the passage queries used by the workflows."""

    def __init__(self, store: DocumentStore, floor_repo: FloorRepository) -> None:
        self.store = store
        self.floor_repo = floor_repo

    async def _to_domain(self, document: Document) -> Passage:
        start_floor = await self.floor_repo.find_by_domain_id(
            _floor_id(document, "passageStartPoint")
        )
        end_floor = await self.floor_repo.find_by_domain_id(
            _floor_id(document, "passageEndPoint")
        )
        if start_floor is None or end_floor is None:
            raise ValueError(f"Passage {document['domainId']} references a missing floor")
        return PassageMap.to_domain(document, start_floor, end_floor)

    def _building_of_floor(self, floor_id: str) -> str | None:
        floor_document = self.store.get(FLOORS, floor_id)
        return floor_document["buildingId"] if floor_document is not None else None

    async def find_by_domain_id(self, passage_id: str) -> Passage | None:
        document = self.store.get(PASSAGES, passage_id)
        return await self._to_domain(document) if document is not None else None

    async def find_by_floors(self, first_floor: Floor, second_floor: Floor) -> Passage | None:
        wanted = {
            (first_floor.domain_id, second_floor.domain_id),
            (second_floor.domain_id, first_floor.domain_id),
        }
        documents = self.store.find(
            PASSAGES,
            lambda doc: (
                _floor_id(doc, "passageStartPoint"),
                _floor_id(doc, "passageEndPoint"),
            )
            in wanted,
        )
        return await self._to_domain(documents[0]) if documents else None

    async def is_there_passage_between_floor_and_building(
        self, floor_id: str, building_id: str
    ) -> bool:
        for document in self.store.find(
            PASSAGES, lambda doc: floor_id in (_floor_id(doc, side) for side in _SIDES)
        ):
            buildings = {self._building_of_floor(_floor_id(document, side)) for side in _SIDES}
            if building_id in buildings:
                return True
        return False

    async def is_there_a_passage_in_floor_coordinates(
        self, x: int, y: int, floor_id: str, exclude_passage_id: str | None
    ) -> bool:
        def occupies(doc: Document) -> bool:
            if doc["domainId"] == exclude_passage_id:
                return False
            return any(
                doc[side]["floorId"] == floor_id and _covers_cell(doc[side], x, y)
                for side in _SIDES
            )

        return bool(self.store.find(PASSAGES, occupies))

    async def find_passages_between_buildings(
        self, first_building_id: str, last_building_id: str
    ) -> list[Passage]:
        wanted = {
            (first_building_id, last_building_id),
            (last_building_id, first_building_id),
        }
        documents = self.store.find(
            PASSAGES,
            lambda doc: (
                self._building_of_floor(_floor_id(doc, "passageStartPoint")),
                self._building_of_floor(_floor_id(doc, "passageEndPoint")),
            )
            in wanted,
        )
        return [await self._to_domain(document) for document in documents]

    async def find_all(self) -> list[Passage]:
        return [await self._to_domain(document) for document in self.store.find(PASSAGES)]

    async def save(self, passage: Passage) -> Passage:
        self.store.upsert(PASSAGES, PassageMap.to_persistence(passage))
        return passage
