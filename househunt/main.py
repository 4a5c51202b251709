"""House hunting tracker FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from househunt.api import lookups, plots, stamp_duty
from househunt.api.errors import register_error_handlers
from househunt.config import settings
from househunt.services import init_database
from househunt.services.logging import setup_server_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    # Startup: create tables and seed an empty store
    init_database()
    logger.info("Database initialized")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.api_title,
    description="Track house-hunting plots, their builders, house models and stamp duty",
    version=settings.api_version,
    lifespan=lifespan,
)

app.include_router(lookups.router)
app.include_router(plots.router)
app.include_router(stamp_duty.router)
register_error_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Start the API server with file + stdout logging."""
    import uvicorn

    load_dotenv()
    setup_server_logging()
    logger.info(f"Starting House Hunting Tracker API on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
