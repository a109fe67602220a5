"""Dependencies for the radar feature."""

from typing import Annotated

from fastapi import Depends

from dodge_radar.core.dependencies import RiotClientDep, SettingsDep, build_throttle
from .service import RadarService


def get_radar_service(client: RiotClientDep, settings: SettingsDep) -> RadarService:
    """Get the radar service with the (faster) radar throttle."""
    return RadarService(
        client, build_throttle(settings, settings.radar_check_delay_seconds)
    )


RadarServiceDep = Annotated[RadarService, Depends(get_radar_service)]

__all__ = ["get_radar_service", "RadarServiceDep"]
