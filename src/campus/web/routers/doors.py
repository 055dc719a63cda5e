"""Door placement endpoints."""

from fastapi import APIRouter

from campus.web.dependencies import DoorServiceDep
from campus.web.exceptions import unwrap
from campus.web.schemas.requests import DoorValidateRequest
from campus.web.schemas.responses import DoorValidationSchema

router = APIRouter(prefix="/doors", tags=["doors"])


@router.post("/validate", response_model=DoorValidationSchema)
async def validate_door(
    request: DoorValidateRequest, service: DoorServiceDep
) -> DoorValidationSchema:
    """Check whether a room door may be placed at the given cell.

    Returns:
        ``{"valid": true}`` for a valid door. Rejections are returned as
        error responses carrying the first rule the door breaks.
    """
    return DoorValidationSchema(valid=unwrap(await service.validate_door(request.to_input())))
