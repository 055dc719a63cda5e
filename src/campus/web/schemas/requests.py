"""Pydantic request schemas for the REST API."""

from pydantic import Field

from campus.application.dtos import (
    CoordinatesInput,
    DoorPositionInput,
    PassageEditInput,
    PassageInput,
    PassagePointEditInput,
    PassagePointInput,
)
from campus.web.schemas.common import CamelModel, CoordinatesSchema


def _coordinates(schema: CoordinatesSchema | None) -> CoordinatesInput | None:
    if schema is None:
        return None
    return CoordinatesInput(x=schema.x, y=schema.y)  # type: ignore[arg-type]


class PassagePointRequest(CamelModel):
    """One end of a new passage."""

    floor_id: str = Field(..., description="Floor the passage end is on")
    first_coordinates: CoordinatesSchema
    last_coordinates: CoordinatesSchema

    def to_input(self) -> PassagePointInput:
        return PassagePointInput(
            floor_id=self.floor_id,
            first_coordinates=_coordinates(self.first_coordinates),  # type: ignore[arg-type]
            last_coordinates=_coordinates(self.last_coordinates),  # type: ignore[arg-type]
        )


class PassageCreateRequest(CamelModel):
    """Request body for passage creation."""

    domain_id: str = Field(..., min_length=1, description="Identity of the new passage")
    passage_start_point: PassagePointRequest
    passage_end_point: PassagePointRequest

    def to_input(self) -> PassageInput:
        return PassageInput(
            domain_id=self.domain_id,
            passage_start_point=self.passage_start_point.to_input(),
            passage_end_point=self.passage_end_point.to_input(),
        )


class PassagePointEditRequest(CamelModel):
    """Partial update of one passage end."""

    floor_id: str | None = None
    first_coordinates: CoordinatesSchema | None = None
    last_coordinates: CoordinatesSchema | None = None

    def to_input(self) -> PassagePointEditInput:
        return PassagePointEditInput(
            floor_id=self.floor_id,
            first_coordinates=_coordinates(self.first_coordinates),
            last_coordinates=_coordinates(self.last_coordinates),
        )


class PassageEditRequest(CamelModel):
    """Request body for a partial passage update."""

    passage_start_point: PassagePointEditRequest | None = None
    passage_end_point: PassagePointEditRequest | None = None

    def to_input(self) -> PassageEditInput:
        return PassageEditInput(
            passage_start_point=(
                self.passage_start_point.to_input() if self.passage_start_point else None
            ),
            passage_end_point=(
                self.passage_end_point.to_input() if self.passage_end_point else None
            ),
        )


class DoorValidateRequest(CamelModel):
    """Request body for a door placement check."""

    floor_id: str = Field(..., description="Floor the room is on")
    initial_x: int = Field(..., description="Left column of the room")
    initial_y: int = Field(..., description="Top row of the room")
    final_x: int = Field(..., description="Right column of the room")
    final_y: int = Field(..., description="Bottom row of the room")
    door_x: int = Field(..., description="Door column")
    door_y: int = Field(..., description="Door row")
    door_orientation: str = Field(..., description="NORTH, SOUTH, WEST or EAST")

    def to_input(self) -> DoorPositionInput:
        return DoorPositionInput(
            floor_id=self.floor_id,
            initial_x=self.initial_x,
            initial_y=self.initial_y,
            final_x=self.final_x,
            final_y=self.final_y,
            door_x=self.door_x,
            door_y=self.door_y,
            door_orientation=self.door_orientation,
        )
