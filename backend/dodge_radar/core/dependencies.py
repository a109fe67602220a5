"""Core dependencies for FastAPI application."""

from collections.abc import AsyncGenerator
from typing import Annotated, Optional

from fastapi import Depends

from .config import Settings, get_global_settings
from .riot_api import ChampionAssetCache, RiotAPIClient
from .throttle import FixedDelayThrottle, Throttle, TokenBucketThrottle

# Process-wide collaborators, created lazily
_asset_cache: Optional[ChampionAssetCache] = None
_token_bucket: Optional[TokenBucketThrottle] = None


def get_app_settings() -> Settings:
    """Get the global settings instance."""
    return get_global_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_asset_cache() -> ChampionAssetCache:
    """Get the process-wide champion asset cache."""
    global _asset_cache
    if _asset_cache is None:
        settings = get_global_settings()
        _asset_cache = ChampionAssetCache(
            base_url=settings.ddragon_base_url,
            fallback_version=settings.ddragon_fallback_version,
            timeout=settings.request_timeout_seconds,
        )
    return _asset_cache


async def get_riot_client(settings: SettingsDep) -> AsyncGenerator[RiotAPIClient, None]:
    """Get a Riot API client for the duration of one request.

    A missing API key does not fail here; the client degrades each call to a
    synthetic 500 instead.
    """
    client = RiotAPIClient(
        api_key=settings.riot_api_key,
        timeout=settings.request_timeout_seconds,
        user_agent=settings.user_agent,
    )
    try:
        yield client
    finally:
        await client.close()


def build_throttle(settings: Settings, delay_seconds: float) -> Throttle:
    """Build the configured throttling policy.

    The fixed-delay policy is per batch; the token bucket is shared by every
    batch in the process since it models the upstream quota.
    """
    global _token_bucket
    if settings.throttle_policy == "token_bucket":
        if _token_bucket is None:
            _token_bucket = TokenBucketThrottle(
                rate_per_second=settings.throttle_rate_per_second,
                capacity=settings.throttle_capacity,
            )
        return _token_bucket
    return FixedDelayThrottle(delay_seconds)


AssetCacheDep = Annotated[ChampionAssetCache, Depends(get_asset_cache)]
RiotClientDep = Annotated[RiotAPIClient, Depends(get_riot_client)]

__all__ = [
    "get_app_settings",
    "get_asset_cache",
    "get_riot_client",
    "build_throttle",
    "SettingsDep",
    "AssetCacheDep",
    "RiotClientDep",
]
