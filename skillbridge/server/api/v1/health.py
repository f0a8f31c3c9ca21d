"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from skillbridge.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """Returns the current semantic version of the API."""
    return {"version": constant.VERSION, "name": constant.PROJECT_NAME}


@router.get(
    f"{constant.API_PREFIX}/health",
    summary="API Health",
    description="Liveness probe used by the web frontend.",
)
async def api_health():
    return {
        "status": "OK",
        "message": f"{constant.PROJECT_NAME} API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
