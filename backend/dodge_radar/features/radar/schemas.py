"""Pydantic schemas for the radar endpoint."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class RadarStatus(str, Enum):
    """Outcome of a lightweight live-game check."""

    IN_GAME = "IN_GAME"
    NOT_IN_GAME = "NOT_IN_GAME"
    ERROR = "ERROR"


class RadarPlayer(BaseModel):
    puuid: Optional[str] = None
    region: Optional[str] = None


class RadarRequest(BaseModel):
    """Body of ``POST /api/check-radar-players-status``."""

    players: Optional[List[RadarPlayer]] = Field(
        None, description="Players to check, as {puuid, region} pairs"
    )


class RadarStatusResponse(BaseModel):
    puuid: Optional[str] = None
    status: RadarStatus
