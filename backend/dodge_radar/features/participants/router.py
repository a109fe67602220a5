"""Last-game participants endpoint."""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Response, status

from dodge_radar.core.exceptions import ServiceException
from dodge_radar.core.responses import preflight_response
from dodge_radar.core.riot_api import Platform
from dodge_radar.core.validation import missing_fields
from .dependencies import ParticipantsServiceDep
from .schemas import LastGameRequest, ParticipantResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["participants"])


@router.post("/get-last-game-participants", response_model=List[ParticipantResponse])
async def get_last_game_participants(
    request: LastGameRequest, service: ParticipantsServiceDep
) -> List[ParticipantResponse]:
    """
    List every participant of the player's most recent match.

    Returns 400 when a field is missing, 404 when the player or their match
    history cannot be found, and 500 for key or upstream failures.
    """
    body = request.model_dump()
    if missing_fields(body, ["game_name", "tag_line", "region"]):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing gameName, tagLine, or region.",
        )

    platform = Platform.parse(request.region)
    if platform is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported region: {request.region}",
        )

    try:
        return await service.get_last_game_participants(
            request.game_name.strip(),
            request.tag_line.strip(),
            platform,
            request.region,
        )
    except ServiceException as e:
        logger.info("Last game lookup failed", error=str(e), status_code=e.status_code)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error("Error in get-last-game-participants", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal server error occurred.",
        )


@router.options("/get-last-game-participants")
async def get_last_game_participants_preflight() -> Response:
    """CORS preflight."""
    return preflight_response()
