"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from campus.application.dtos import (
    BuildingOutput,
    FloorOutput,
    PassageOutput,
    PassagePointOutput,
)
from campus.web.schemas.common import CamelModel, CoordinatesSchema


class BuildingDimensionsSchema(CamelModel):
    """Building footprint in grid cells."""

    width: int
    length: int


class BuildingSchema(CamelModel):
    """A building as embedded in floor responses."""

    domain_id: str
    building_code: str
    building_name: str | None = None
    building_description: str | None = None
    building_dimensions: BuildingDimensionsSchema

    @classmethod
    def from_output(cls, output: BuildingOutput) -> "BuildingSchema":
        return cls(
            domain_id=output.domain_id,
            building_code=output.building_code,
            building_name=output.building_name,
            building_description=output.building_description,
            building_dimensions=BuildingDimensionsSchema(
                width=output.width, length=output.length
            ),
        )


class FloorSchema(CamelModel):
    """A floor with its building."""

    domain_id: str
    floor_number: int
    floor_description: str | None = None
    building: BuildingSchema

    @classmethod
    def from_output(cls, output: FloorOutput) -> "FloorSchema":
        return cls(
            domain_id=output.domain_id,
            floor_number=output.floor_number,
            floor_description=output.floor_description,
            building=BuildingSchema.from_output(output.building),
        )


class PassagePointSchema(CamelModel):
    """One end of a passage."""

    floor: FloorSchema
    first_coordinates: CoordinatesSchema
    last_coordinates: CoordinatesSchema

    @classmethod
    def from_output(cls, output: PassagePointOutput) -> "PassagePointSchema":
        return cls(
            floor=FloorSchema.from_output(output.floor),
            first_coordinates=CoordinatesSchema(
                x=output.first_coordinates.x, y=output.first_coordinates.y
            ),
            last_coordinates=CoordinatesSchema(
                x=output.last_coordinates.x, y=output.last_coordinates.y
            ),
        )


class PassageSchema(CamelModel):
    """Response for every passage operation."""

    domain_id: str = Field(..., description="Passage identity")
    passage_start_point: PassagePointSchema
    passage_end_point: PassagePointSchema

    @classmethod
    def from_output(cls, output: PassageOutput) -> "PassageSchema":
        return cls(
            domain_id=output.domain_id,
            passage_start_point=PassagePointSchema.from_output(output.passage_start_point),
            passage_end_point=PassagePointSchema.from_output(output.passage_end_point),
        )


class DoorValidationSchema(CamelModel):
    """Response for a successful door placement check."""

    valid: bool = Field(..., description="Whether the door placement is valid")


class ErrorResponseSchema(BaseModel):
    """Error response body. Keys stay snake_case."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional details")
