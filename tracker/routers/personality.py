from fastapi import APIRouter
import logging

from services.client_metrics import ability_radar, attachment_matrix_position, attachment_quadrant
from services.personality_codec import PersonalityAxes, axes_from_typed_code, code_from_axes
from tracker.schemas.personality import (
    AxesPayload,
    ClientMetricsRequest,
    ClientMetricsResponse,
    CodeResponse,
    TypedCodeRequest,
    TypedCodeResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/personality/code", response_model=CodeResponse)
async def personality_code(axes: AxesPayload):
    """Type code for the current slider positions."""
    return CodeResponse(code=code_from_axes(PersonalityAxes(**axes.model_dump())))


@router.post("/personality/typed-code", response_model=TypedCodeResponse)
async def personality_typed_code(request: TypedCodeRequest):
    """
    Applies a code typed by the reader. Invalid characters are dropped silently
    so partial input while typing is always accepted.
    """
    code, axes = axes_from_typed_code(request.raw, PersonalityAxes(**request.axes.model_dump()))
    return TypedCodeResponse(code=code, axes=AxesPayload(**axes.model_dump()))


@router.post("/clients/metrics", response_model=ClientMetricsResponse)
async def client_metrics(request: ClientMetricsRequest):
    """Derived chart values for a client profile: type code, attachment placement and ability radar."""
    logger.info("Computing client metrics")
    return ClientMetricsResponse(
        personality_code=code_from_axes(PersonalityAxes(**request.axes.model_dump())),
        attachment_position=attachment_matrix_position(request.attachment),
        attachment_quadrant=attachment_quadrant(request.attachment),
        ability_radar=ability_radar(request.abilities) if request.abilities else [],
    )
