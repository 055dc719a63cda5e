"""Passage endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from campus.domain.results import FailureType
from campus.web.dependencies import PassageServiceDep
from campus.web.exceptions import ServiceFailure, unwrap
from campus.web.schemas.requests import PassageCreateRequest, PassageEditRequest
from campus.web.schemas.responses import PassageSchema

router = APIRouter(prefix="/passages", tags=["passages"])


@router.post("", response_model=PassageSchema, status_code=201)
async def create_passage(
    request: PassageCreateRequest, service: PassageServiceDep
) -> PassageSchema:
    """Create a passage between floors of two buildings.

    Raises:
        ServiceFailure: If any creation rule rejects the passage.
    """
    output = unwrap(await service.create_passage(request.to_input()))
    return PassageSchema.from_output(output)


@router.get("", response_model=list[PassageSchema])
async def list_passages(
    service: PassageServiceDep,
    first_building_id: Annotated[str | None, Query(alias="firstBuildingId")] = None,
    last_building_id: Annotated[str | None, Query(alias="lastBuildingId")] = None,
) -> list[PassageSchema]:
    """List passages, optionally only those between two buildings.

    Both building ids must be given together.
    """
    if first_building_id is None and last_building_id is None:
        outputs = unwrap(await service.list_passages())
    elif first_building_id is None or last_building_id is None:
        raise ServiceFailure(
            "Both firstBuildingId and lastBuildingId are required.",
            FailureType.INVALID_INPUT,
        )
    else:
        outputs = unwrap(
            await service.list_passages_between_buildings(first_building_id, last_building_id)
        )
    return [PassageSchema.from_output(output) for output in outputs]


@router.get("/{passage_id}", response_model=PassageSchema)
async def get_passage(passage_id: str, service: PassageServiceDep) -> PassageSchema:
    """Return a single passage."""
    return PassageSchema.from_output(unwrap(await service.get_passage(passage_id)))


@router.patch("/{passage_id}", response_model=PassageSchema)
@router.put("/{passage_id}", response_model=PassageSchema)
async def edit_passage(
    passage_id: str, request: PassageEditRequest, service: PassageServiceDep
) -> PassageSchema:
    """Partially update a passage; omitted fields keep their current value."""
    output = unwrap(await service.edit_passage(passage_id, request.to_input()))
    return PassageSchema.from_output(output)
