"""Codecs between domain objects, persisted documents and output DTOs.

Persisted documents use the camelCase layout of the document store:

    {"domainId": ..., "passageStartPoint": {"floorId": ...,
     "firstCoordinates": {"x": 0, "y": 0}, "lastCoordinates": {...}},
     "passageEndPoint": {...}}

``to_domain`` raises ValueError for documents that no longer satisfy the
domain invariants; stored data is expected to be valid.
"""

from __future__ import annotations

from typing import Any

from campus.domain.entities import Building, Floor
from campus.domain.passage import Passage, PassagePoint
from campus.domain.results import Result
from campus.domain.value_objects import BuildingCode, BuildingDimensions, FloorNumber

from .dtos import (
    BuildingOutput,
    CoordinatesOutput,
    FloorOutput,
    PassageOutput,
    PassagePointOutput,
)

__all__ = ["BuildingMap", "FloorMap", "PassageMap"]


def _unwrap(result: Result[Any]) -> Any:
    if result.is_failure:
        raise ValueError(result.error)
    return result.get_value()


class BuildingMap:
    """Conversions for Building."""

    @staticmethod
    def to_dto(building: Building) -> BuildingOutput:
        return BuildingOutput(
            domain_id=building.domain_id,
            building_code=building.code.value,
            width=building.dimensions.width,
            length=building.dimensions.length,
            building_name=building.name,
            building_description=building.description,
        )

    @staticmethod
    def to_persistence(building: Building) -> dict[str, Any]:
        document: dict[str, Any] = {
            "domainId": building.domain_id,
            "buildingCode": building.code.value,
            "buildingDimensions": {
                "width": building.dimensions.width,
                "length": building.dimensions.length,
            },
        }
        if building.name is not None:
            document["buildingName"] = building.name
        if building.description is not None:
            document["buildingDescription"] = building.description
        return document

    @staticmethod
    def to_domain(raw: dict[str, Any]) -> Building:
        dimensions = raw["buildingDimensions"]
        return _unwrap(
            Building.create(
                code=BuildingCode(raw["buildingCode"]),
                dimensions=_unwrap(
                    BuildingDimensions.create(dimensions["width"], dimensions["length"])
                ),
                name=raw.get("buildingName"),
                description=raw.get("buildingDescription"),
                domain_id=raw["domainId"],
            )
        )


class FloorMap:
    """Conversions for Floor."""

    @staticmethod
    def to_dto(floor: Floor) -> FloorOutput:
        return FloorOutput(
            domain_id=floor.domain_id,
            floor_number=floor.floor_number.value,
            building=BuildingMap.to_dto(floor.building),
            floor_description=floor.description,
        )

    @staticmethod
    def to_persistence(floor: Floor) -> dict[str, Any]:
        document: dict[str, Any] = {
            "domainId": floor.domain_id,
            "buildingId": floor.building.domain_id,
            "floorNumber": floor.floor_number.value,
        }
        if floor.description is not None:
            document["floorDescription"] = floor.description
        return document

    @staticmethod
    def to_domain(raw: dict[str, Any], building: Building) -> Floor:
        """Rebuild a floor from its document and its already loaded building."""
        return _unwrap(
            Floor.create(
                building=building,
                floor_number=_unwrap(FloorNumber.create(raw["floorNumber"])),
                description=raw.get("floorDescription"),
                domain_id=raw["domainId"],
            )
        )


def _point_to_dto(point: PassagePoint) -> PassagePointOutput:
    return PassagePointOutput(
        floor=FloorMap.to_dto(point.floor),
        first_coordinates=CoordinatesOutput(
            x=point.first_coordinates.x, y=point.first_coordinates.y
        ),
        last_coordinates=CoordinatesOutput(
            x=point.last_coordinates.x, y=point.last_coordinates.y
        ),
    )


def _point_to_persistence(point: PassagePoint) -> dict[str, Any]:
    return {
        "floorId": point.floor.domain_id,
        "firstCoordinates": {"x": point.first_coordinates.x, "y": point.first_coordinates.y},
        "lastCoordinates": {"x": point.last_coordinates.x, "y": point.last_coordinates.y},
    }


def _point_to_domain(raw: dict[str, Any], floor: Floor) -> PassagePoint:
    first, last = raw["firstCoordinates"], raw["lastCoordinates"]
    return _unwrap(
        PassagePoint.from_values(floor, first["x"], first["y"], last["x"], last["y"])
    )


class PassageMap:
    """Conversions for Passage."""

    @staticmethod
    def to_dto(passage: Passage) -> PassageOutput:
        return PassageOutput(
            domain_id=passage.domain_id,
            passage_start_point=_point_to_dto(passage.start_point),
            passage_end_point=_point_to_dto(passage.end_point),
        )

    @staticmethod
    def to_persistence(passage: Passage) -> dict[str, Any]:
        return {
            "domainId": passage.domain_id,
            "passageStartPoint": _point_to_persistence(passage.start_point),
            "passageEndPoint": _point_to_persistence(passage.end_point),
        }

    @staticmethod
    def to_domain(raw: dict[str, Any], start_floor: Floor, end_floor: Floor) -> Passage:
        """Rebuild a passage from its document and the floors it references."""
        return _unwrap(
            Passage.create(
                start_point=_point_to_domain(raw["passageStartPoint"], start_floor),
                end_point=_point_to_domain(raw["passageEndPoint"], end_floor),
                domain_id=raw["domainId"],
            )
        )
