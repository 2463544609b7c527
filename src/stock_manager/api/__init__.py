"""HTTP application entry point."""

from stock_manager.api.app import DatabaseStatus, create_app, get_db_engine

__all__ = ["DatabaseStatus", "create_app", "get_db_engine"]
