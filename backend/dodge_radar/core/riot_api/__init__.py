"""
Riot API client package.

Provides the authenticated HTTP client, endpoint routing, typed errors and the
Data Dragon champion asset cache.
"""

from .assets import ChampionAssetCache
from .client import RiotAPIClient, UpstreamResponse
from .constants import Platform, Region, TeamId, UNKNOWN_ASSET
from .endpoints import RiotAPIEndpoints, DataDragonEndpoints
from .errors import (
    RiotAPIError,
    ConfigurationError,
    RateLimitError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
)
from .models import (
    AccountDTO,
    SummonerDTO,
    BannedChampionDTO,
    CurrentGameParticipantDTO,
    CurrentGameInfoDTO,
)

__all__ = [
    "ChampionAssetCache",
    "RiotAPIClient",
    "UpstreamResponse",
    "Platform",
    "Region",
    "TeamId",
    "UNKNOWN_ASSET",
    "RiotAPIEndpoints",
    "DataDragonEndpoints",
    "RiotAPIError",
    "ConfigurationError",
    "RateLimitError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "AccountDTO",
    "SummonerDTO",
    "BannedChampionDTO",
    "CurrentGameParticipantDTO",
    "CurrentGameInfoDTO",
]
