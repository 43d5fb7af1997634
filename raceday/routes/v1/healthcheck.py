"""Healthcheck endpoint for the V1 API."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends

from ...config.settings import get_settings

router = APIRouter()


@router.get("/healthcheck")
async def healthcheck(settings=Depends(get_settings)) -> dict[str, Any]:
    """Return the API status and database connectivity."""
    status = "healthy"
    api_status = "up"
    db_status = "unknown"

    try:
        from ...services.db import connector as db_connector

        if not settings.database_path:
            db_status = "error: DATABASE_PATH not set"
            status = "degraded"
        else:
            db_connector.query("SELECT 1 AS health_check", database_path=settings.database_path)
            db_status = "connected"
    except Exception as e:
        db_status = f"error: {str(e)}"
        status = "degraded"

    return {
        "status": status,
        "components": {
            "api": api_status,
            "database": db_status,
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
