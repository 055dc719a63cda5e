"""Pydantic schemas for the REST API."""

from campus.web.schemas.common import CamelModel, CoordinatesSchema
from campus.web.schemas.requests import (
    DoorValidateRequest,
    PassageCreateRequest,
    PassageEditRequest,
    PassagePointEditRequest,
    PassagePointRequest,
)
from campus.web.schemas.responses import (
    BuildingDimensionsSchema,
    BuildingSchema,
    DoorValidationSchema,
    ErrorResponseSchema,
    FloorSchema,
    PassagePointSchema,
    PassageSchema,
)

__all__ = [
    # Common
    "CamelModel",
    "CoordinatesSchema",
    # Requests
    "DoorValidateRequest",
    "PassageCreateRequest",
    "PassageEditRequest",
    "PassagePointEditRequest",
    "PassagePointRequest",
    # Responses
    "BuildingDimensionsSchema",
    "BuildingSchema",
    "DoorValidationSchema",
    "ErrorResponseSchema",
    "FloorSchema",
    "PassagePointSchema",
    "PassageSchema",
]
