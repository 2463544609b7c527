"""Database connectivity probe.

The probe runs a ``SELECT 1`` round trip and reports the outcome as a
ConnectivityResult instead of raising, leaving the decision (fail fast,
degrade, ignore) to whoever started the process.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from stock_manager.exceptions import DatabaseConnectionError

logger = structlog.get_logger()

# Pending fire-and-forget probes; the event loop only keeps weak references.
_background_tasks: set[asyncio.Task[ConnectivityResult]] = set()


@dataclass(frozen=True)
class ConnectivityResult:
    """Outcome of a single connectivity probe."""

    ok: bool
    error: BaseException | None = None

    @property
    def cause(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def raise_for_status(self) -> None:
        """Raise DatabaseConnectionError if the probe failed."""
        if not self.ok:
            raise DatabaseConnectionError(f"Unable to connect to the database: {self.cause}") from self.error


async def verify_connectivity(engine: AsyncEngine) -> ConnectivityResult:
    """Check that the database behind ``engine`` answers a trivial query.

    Args:
        engine: Engine to probe.

    Returns:
        ConnectivityResult with ok=True on success, or ok=False and the
        underlying error when the server is unreachable or rejects the
        credentials.
    """
    url = engine.url
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            "database_connection_failed",
            host=url.host,
            database=url.database,
            error=str(e),
        )
        return ConnectivityResult(ok=False, error=e)

    logger.info("database_connection_established", host=url.host, database=url.database)
    return ConnectivityResult(ok=True)


def schedule_connectivity_check(engine: AsyncEngine) -> asyncio.Task[ConnectivityResult]:
    """Start verify_connectivity() in the background and return at once.

    Must be called from a running event loop. The returned task may be
    awaited for the result or ignored; either way the outcome is logged.
    """
    task = asyncio.get_running_loop().create_task(verify_connectivity(engine))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task
