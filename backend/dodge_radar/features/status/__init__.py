"""Player status feature: live-game and recent-game risk for a batch of players."""

from .models import (
    LiveLookupOutcome,
    PlayerIdentity,
    PlayerStatus,
    ResolutionErrorCode,
    ResolutionState,
    StatusKind,
)
from .resolver import PlayerStatusResolver
from .router import router as status_router
from .service import StatusCheckService

__all__ = [
    "LiveLookupOutcome",
    "PlayerIdentity",
    "PlayerStatus",
    "ResolutionErrorCode",
    "ResolutionState",
    "StatusKind",
    "PlayerStatusResolver",
    "StatusCheckService",
    "status_router",
]
