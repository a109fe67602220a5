"""Radar endpoint: lightweight in-game check for known PUUIDs."""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Response, status

from dodge_radar.core.responses import preflight_response
from .dependencies import RadarServiceDep
from .schemas import RadarRequest, RadarStatusResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["radar"])


@router.post("/check-radar-players-status", response_model=List[RadarStatusResponse])
async def check_radar_players_status(
    request: RadarRequest, service: RadarServiceDep
) -> List[RadarStatusResponse]:
    """Report IN_GAME / NOT_IN_GAME / ERROR for each ``{puuid, region}``."""
    if request.players is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid player list format.",
        )

    try:
        results = await service.check_players(request.players)
    except Exception as e:
        logger.error("Radar check failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal server error occurred.",
        )

    return [RadarStatusResponse(puuid=puuid, status=result) for puuid, result in results]


@router.options("/check-radar-players-status")
async def check_radar_players_status_preflight() -> Response:
    """CORS preflight."""
    return preflight_response()
