"""Shared HTTP response helpers for routers and exception handlers."""

from typing import Dict, Optional

from fastapi import Response
from fastapi.responses import JSONResponse

ALLOWED_METHODS = "POST, OPTIONS"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ALLOWED_METHODS,
    "Access-Control-Allow-Headers": "Content-Type",
}


def error_response(
    status_code: int, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """JSON error body in the ``{"error": ...}`` shape the browser client reads."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def preflight_response() -> Response:
    """Answer a bare ``OPTIONS`` request with permissive CORS headers."""
    return Response(status_code=200, headers=CORS_HEADERS)
