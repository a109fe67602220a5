"""Radar feature: lightweight live-game presence checks."""

from .router import router as radar_router
from .schemas import RadarStatus
from .service import RadarService

__all__ = ["radar_router", "RadarStatus", "RadarService"]
