"""V1 API routes."""

import logging

from fastapi import APIRouter

from .events import router as events_router
from .healthcheck import router as healthcheck_router
from .races import router as races_router

logger = logging.getLogger(__name__)


def create_router() -> APIRouter:
    """Create API router with all endpoints"""
    router = APIRouter()

    # Include all endpoints
    router.include_router(healthcheck_router)
    router.include_router(races_router, prefix="/races")
    router.include_router(events_router, prefix="/events")

    logger.info("All API endpoints registered")

    return router
