"""
Main FastAPI application.

This module creates and configures the FastAPI application.
"""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request

from .config.settings import get_settings
from .errors.handlers import register_exception_handlers
from .routes import api_router
from .services.logger import api_logger

load_dotenv()

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Application startup initiated")
    from .services.db.bootstrap import get_initializer

    settings = get_settings()
    get_initializer(
        settings.database_path,
        seed_demo_data=settings.seed_demo_data,
        race_count=settings.seed_race_count,
        event_count=settings.seed_event_count,
        random_seed=settings.seed_random_seed,
    ).initialize()
    api_logger.log_event(
        "Storage ready",
        additional_context={
            "database_path": settings.database_path,
            "seed_demo_data": settings.seed_demo_data,
        },
    )
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown initiated")
    from .services.db.connector import close_connections
    close_connections()
    logger.info("Database connections closed")
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Raceday Catalog API",
    description="Read-only race and sporting event catalogs",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def track_execution_time(request: Request, call_next):
    """Record the request start time so error handlers can report execution time."""
    start_time = time.perf_counter()
    request.state.start_time = start_time

    try:
        response = await call_next(request)
    finally:
        request.state.execution_time_ms = (time.perf_counter() - start_time) * 1000

    return response

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": "Raceday Catalog API",
        "message": "Welcome to the raceday catalog API",
        "docs": "/docs",
    }


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        f"Request: {request.method} {request.url.path} - {process_time * 1000:.1f}ms"
    )
    return response


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
