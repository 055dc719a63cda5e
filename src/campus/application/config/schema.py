"""Pydantic models for the campus configuration file.

A configuration file describes how the service runs (logging, server
binding, building code rules) and, optionally, a campus to seed into the
repositories: buildings, their floors and the passages between them.

Example:
    >>> config = CampusConfiguration(
    ...     schema_version="1.0",
    ...     campus=CampusSeedConfig(
    ...         buildings=[BuildingSeedConfig(domain_id="b1", code="A", width=5, length=10)]
    ...     ),
    ... )
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from campus.domain.value_objects import BUILDING_CODE_MAX_LENGTH

# Version 1.0: service settings and campus seed data
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging settings applied by the CLI and the web entry point."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="INFO", description="Root log level")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v


class ServerConfig(BaseModel):
    """HTTP server binding."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)


class BuildingRulesConfig(BaseModel):
    """Rules applied when building codes are created."""

    model_config = ConfigDict(extra="forbid")

    max_code_length: int = Field(default=BUILDING_CODE_MAX_LENGTH, ge=1, le=50)


class BuildingSeedConfig(BaseModel):
    """A building to load on startup."""

    model_config = ConfigDict(extra="forbid")

    domain_id: str = Field(..., min_length=1)
    code: str
    width: int = Field(..., ge=1)
    length: int = Field(..., ge=1)
    name: str | None = None
    description: str | None = None


class FloorSeedConfig(BaseModel):
    """A floor to load on startup."""

    model_config = ConfigDict(extra="forbid")

    domain_id: str = Field(..., min_length=1)
    building_id: str
    floor_number: int
    description: str | None = None


class CoordinatesConfig(BaseModel):
    """A grid cell."""

    model_config = ConfigDict(extra="forbid")

    x: int
    y: int


class PassagePointSeedConfig(BaseModel):
    """One end of a seeded passage."""

    model_config = ConfigDict(extra="forbid")

    floor_id: str
    first_coordinates: CoordinatesConfig
    last_coordinates: CoordinatesConfig


class PassageSeedConfig(BaseModel):
    """A passage created through the passage workflow on startup."""

    model_config = ConfigDict(extra="forbid")

    domain_id: str = Field(..., min_length=1)
    start_point: PassagePointSeedConfig
    end_point: PassagePointSeedConfig


class CampusSeedConfig(BaseModel):
    """Campus data to seed into the repositories.

    Floors must reference declared buildings and ids must be unique within
    each collection. Passage placement rules are not checked here; seeding
    runs every passage through the creation workflow instead.
    """

    model_config = ConfigDict(extra="forbid")

    buildings: list[BuildingSeedConfig] = Field(default_factory=list)
    floors: list[FloorSeedConfig] = Field(default_factory=list)
    passages: list[PassageSeedConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self) -> CampusSeedConfig:
        for name, items in (
            ("buildings", self.buildings),
            ("floors", self.floors),
            ("passages", self.passages),
        ):
            seen: set[str] = set()
            for item in items:
                if item.domain_id in seen:
                    raise ValueError(f"Duplicate domain_id '{item.domain_id}' in {name}")
                seen.add(item.domain_id)

        building_ids = {building.domain_id for building in self.buildings}
        for floor in self.floors:
            if floor.building_id not in building_ids:
                raise ValueError(
                    f"Floor '{floor.domain_id}' references unknown building "
                    f"'{floor.building_id}'"
                )
        return self


class CampusConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        logging: Logging settings
        server: HTTP server binding
        building: Building code rules
        campus: Optional seed data
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    building: BuildingRulesConfig = Field(default_factory=BuildingRulesConfig)
    campus: CampusSeedConfig | None = Field(
        default=None, description="Campus seed data (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major = v.split(".")[0]
        supported_majors = {version.split(".")[0] for version in SUPPORTED_VERSIONS}
        if major in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
