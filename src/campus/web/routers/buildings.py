"""Building endpoints derived from passage data."""

from fastapi import APIRouter

from campus.web.dependencies import FloorServiceDep
from campus.web.exceptions import unwrap
from campus.web.schemas.responses import FloorSchema

router = APIRouter(prefix="/buildings", tags=["buildings"])


@router.get("/{building_id}/floors/with-passage", response_model=list[FloorSchema])
async def list_floors_with_passage(
    building_id: str, service: FloorServiceDep
) -> list[FloorSchema]:
    """List the floors of a building that have at least one passage."""
    outputs = unwrap(await service.list_floors_with_passage(building_id))
    return [FloorSchema.from_output(output) for output in outputs]
