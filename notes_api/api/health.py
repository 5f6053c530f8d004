"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/detailed: Application info and store size (for debugging)
"""

from typing import Any

from fastapi import APIRouter

from notes_api.core.config import get_app_config, get_environment
from notes_api.core.dependencies import Store
from notes_api.core.utils import format_timestamp, utc_now

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running.
    No dependency checks - this endpoint should always respond quickly.
    """
    return {"status": "OK", "timestamp": format_timestamp(utc_now())}


@router.get("/health/detailed")
async def detailed_health_check(store: Store) -> dict[str, Any]:
    """
    Detailed health check.

    Returns application identity and the number of notes held in memory.
    """
    app_settings = get_app_config().application

    return {
        "status": "OK",
        "application": {
            "name": app_settings.name,
            "version": app_settings.version,
            "env": get_environment(),
        },
        "notes": {"count": store.count()},
        "timestamp": format_timestamp(utc_now()),
    }
