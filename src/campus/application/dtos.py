"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CoordinatesInput:
    """Input DTO for a grid cell. Components are validated by the domain."""

    x: int
    y: int


@dataclass
class PassagePointInput:
    """Input DTO for one end of a new passage."""

    floor_id: str
    first_coordinates: CoordinatesInput
    last_coordinates: CoordinatesInput


@dataclass
class PassageInput:
    """Input DTO for passage creation."""

    domain_id: str
    passage_start_point: PassagePointInput
    passage_end_point: PassagePointInput


@dataclass
class PassagePointEditInput:
    """Partial update of one end of a passage; omitted fields keep their value."""

    floor_id: str | None = None
    first_coordinates: CoordinatesInput | None = None
    last_coordinates: CoordinatesInput | None = None


@dataclass
class PassageEditInput:
    """Partial update of a passage; omitted ends are left untouched."""

    passage_start_point: PassagePointEditInput | None = None
    passage_end_point: PassagePointEditInput | None = None

    @property
    def is_empty(self) -> bool:
        """True when neither end is being updated."""
        return self.passage_start_point is None and self.passage_end_point is None


@dataclass
class BuildingOutput:
    """Output DTO for a building."""

    domain_id: str
    building_code: str
    width: int
    length: int
    building_name: str | None = None
    building_description: str | None = None


@dataclass
class FloorOutput:
    """Output DTO for a floor, embedding its building."""

    domain_id: str
    floor_number: int
    building: BuildingOutput
    floor_description: str | None = None


@dataclass
class CoordinatesOutput:
    """Output DTO for a grid cell."""

    x: int
    y: int


@dataclass
class PassagePointOutput:
    """Output DTO for one end of a passage."""

    floor: FloorOutput
    first_coordinates: CoordinatesOutput
    last_coordinates: CoordinatesOutput


@dataclass
class PassageOutput:
    """Output DTO returned by every passage operation."""

    domain_id: str
    passage_start_point: PassagePointOutput
    passage_end_point: PassagePointOutput


@dataclass
class DoorPositionInput:
    """Input DTO for a door placement check."""

    floor_id: str
    initial_x: int
    initial_y: int
    final_x: int
    final_y: int
    door_x: int
    door_y: int
    door_orientation: str
