"""FastAPI application for the Stock Manager backend.

The lifespan owns the database engine: it builds it once, runs the
connectivity probe according to the configured startup policy, and
disposes of it on shutdown. Routers get the engine through the
``get_db_engine`` dependency rather than importing it.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress
from enum import Enum

import structlog
from fastapi import FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from stock_manager import __version__
from stock_manager.config import StartupPolicy, get_settings
from stock_manager.db import get_engine, reset_engine, schedule_connectivity_check, verify_connectivity
from stock_manager.log import configure_logging

logger = structlog.get_logger()


class DatabaseStatus(str, Enum):
    """Database availability as seen by the running application."""

    PENDING = "pending"
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level)

    engine = get_engine()
    app.state.engine = engine
    app.state.connectivity = None
    app.state.database_status = DatabaseStatus.PENDING

    policy = settings.db_startup_policy
    logger.info("application_starting", version=__version__, startup_policy=policy.value)

    try:
        if policy is StartupPolicy.BACKGROUND:
            app.state.connectivity = schedule_connectivity_check(engine)
        else:
            result = await verify_connectivity(engine)
            if policy is StartupPolicy.FAIL_FAST:
                result.raise_for_status()
            app.state.database_status = (
                DatabaseStatus.REACHABLE if result.ok else DatabaseStatus.UNREACHABLE
            )
        yield
    finally:
        task = app.state.connectivity
        if task is not None and not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        await engine.dispose()
        reset_engine()
        logger.info("application_stopped")


def get_db_engine(request: Request) -> AsyncEngine:
    """FastAPI dependency returning the engine created at startup."""
    return request.app.state.engine


def _current_status(app: FastAPI) -> DatabaseStatus:
    task: asyncio.Task | None = app.state.connectivity
    if task is None:
        return app.state.database_status
    if not task.done():
        return DatabaseStatus.PENDING
    if task.cancelled() or task.exception() is not None:
        return DatabaseStatus.UNREACHABLE
    return DatabaseStatus.REACHABLE if task.result().ok else DatabaseStatus.UNREACHABLE


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Stock Manager",
        description="Inventory management backend",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health_check(request: Request) -> dict[str, str]:
        return {"status": "ok", "database": _current_status(request.app).value}

    return app
