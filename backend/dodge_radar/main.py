"""Main FastAPI application for the Dodge Radar backend."""

from contextlib import asynccontextmanager
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dodge_radar import __version__
from dodge_radar.core import get_global_settings
from dodge_radar.core.dependencies import get_asset_cache
from dodge_radar.core.logging import setup_logging
from dodge_radar.core.responses import ALLOWED_METHODS, error_response
from dodge_radar.features.participants import participants_router
from dodge_radar.features.radar import radar_router
from dodge_radar.features.status import status_router

settings = get_global_settings()
setup_logging(settings.log_level, debug=settings.debug)
logger = structlog.get_logger(__name__)


def _validate_api_key_configuration() -> None:
    """Log Riot API key configuration status."""
    if not settings.has_riot_api_key:
        logger.warning(
            "RIOT_API_KEY not configured! Every Riot API call will report a server key error.",
            hint="Get your key from https://developer.riotgames.com",
        )
    elif settings.riot_api_key.startswith("RGAPI-"):
        logger.info("Riot API key configured (development key detected)")
        logger.warning("Development API keys expire every 24 hours!")
    else:
        logger.info("Riot API key configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up Dodge Radar backend", version=__version__)
    _validate_api_key_configuration()
    # Eager load; a failure is logged and retried lazily on first request
    await get_asset_cache().ensure_loaded()
    yield
    logger.info("Shutting down Dodge Radar backend")


app = FastAPI(
    title="Dodge Radar",
    description="""
    Live-game and recent-game lookups for League of Legends players.

    * **Status check**: per-player IN_GAME / HIGH_RISK / LOW_RISK classification
    * **Radar**: lightweight in-game check for known PUUIDs
    * **Last game**: Riot IDs and icons of everyone in a player's last match

    Players are checked sequentially with a throttle between them to stay under
    the Riot API rate limit.
    """,
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors as ``{"error": ...}``; 405 carries an Allow header."""
    if exc.status_code == 405:
        allow = (exc.headers or {}).get("Allow") or ALLOWED_METHODS
        if allow == "POST":
            # Preflight handlers are registered as separate OPTIONS routes
            allow = ALLOWED_METHODS
        return error_response(
            405,
            f"Method {request.method} Not Allowed",
            headers={"Allow": allow},
        )
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies are rejected with 400 before any upstream call."""
    logger.info("Rejected malformed request body", path=request.url.path)
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body.",
            "details": jsonable_encoder(exc.errors()),
        },
    )


app.include_router(status_router)
app.include_router(radar_router)
app.include_router(participants_router)


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Reports whether the Riot API key is configured and which asset patch
    version is loaded.
    """
    assets = get_asset_cache()
    return {
        "status": "healthy",
        "version": __version__,
        "riot_api_key_configured": settings.has_riot_api_key,
        "assets_loaded": assets.is_loaded,
        "asset_version": assets.version,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "dodge_radar.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
