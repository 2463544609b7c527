"""Database bootstrap: the shared engine and its connectivity probe."""

from stock_manager.db.connection import (
    ConnectionConfig,
    Dialect,
    get_engine,
    initialize,
    reset_engine,
)
from stock_manager.db.probe import (
    ConnectivityResult,
    schedule_connectivity_check,
    verify_connectivity,
)

__all__ = [
    "ConnectionConfig",
    "ConnectivityResult",
    "Dialect",
    "get_engine",
    "initialize",
    "reset_engine",
    "schedule_connectivity_check",
    "verify_connectivity",
]
