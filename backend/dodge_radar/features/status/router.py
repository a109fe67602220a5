"""Batch status check endpoint."""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Response, status

from dodge_radar.core.responses import preflight_response
from .dependencies import StatusCheckServiceDep
from .models import BatchEntry, PlayerIdentity
from .schemas import PlayerStatusResponse, StatusCheckRequest
from .transformers import status_to_response

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["status"])


@router.post("/check-status", response_model=List[PlayerStatusResponse])
@router.post("/api/check-status", response_model=List[PlayerStatusResponse])
async def check_status(
    request: StatusCheckRequest, service: StatusCheckServiceDep
) -> List[PlayerStatusResponse]:
    """
    Resolve the live/recent-game status of every player in the request.

    Players are checked sequentially with a throttle between them, so the
    response time grows with the batch size. Each entry in the response is
    tagged with the caller's ``id`` and appears in input order.
    """
    entries = [
        BatchEntry(
            entry_id=player.id,
            identity=PlayerIdentity(
                game_name=player.game_name,
                tag_line=player.tag_line,
                region=player.region,
            ),
        )
        for player in request.players
    ]

    try:
        results = await service.check_players(entries, request.champ_to_track)
    except Exception as e:
        logger.error("Status check failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal server error occurred.",
        )

    return [status_to_response(entry_id, result) for entry_id, result in results]


@router.options("/check-status")
@router.options("/api/check-status")
async def check_status_preflight() -> Response:
    """CORS preflight."""
    return preflight_response()
