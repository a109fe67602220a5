"""Dependencies for the status feature."""

from typing import Annotated

from fastapi import Depends

from dodge_radar.core.dependencies import (
    AssetCacheDep,
    RiotClientDep,
    SettingsDep,
    build_throttle,
)
from .resolver import PlayerStatusResolver
from .service import StatusCheckService


def get_status_resolver(
    client: RiotClientDep,
    assets: AssetCacheDep,
    settings: SettingsDep,
) -> PlayerStatusResolver:
    """Get a resolver bound to this request's Riot client."""
    return PlayerStatusResolver(
        client,
        assets,
        high_risk_threshold_minutes=settings.high_risk_threshold_minutes,
    )


def get_status_check_service(
    resolver: Annotated[PlayerStatusResolver, Depends(get_status_resolver)],
    settings: SettingsDep,
) -> StatusCheckService:
    """Get the batch status service with the configured throttle."""
    return StatusCheckService(
        resolver, build_throttle(settings, settings.status_check_delay_seconds)
    )


StatusCheckServiceDep = Annotated[StatusCheckService, Depends(get_status_check_service)]

__all__ = [
    "get_status_resolver",
    "get_status_check_service",
    "StatusCheckServiceDep",
]
