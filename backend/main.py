"""Application entry point for the Dodge Radar backend."""

import os

import uvicorn
from dodge_radar.core import get_global_settings

if __name__ == "__main__":
    settings = get_global_settings()
    uvicorn.run(
        "dodge_radar.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
