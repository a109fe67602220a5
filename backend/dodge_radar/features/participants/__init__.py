"""Participants feature: Riot IDs and icons of everyone in a player's last match."""

from .router import router as participants_router
from .service import ParticipantsService

__all__ = ["participants_router", "ParticipantsService"]
