"""Stock Manager - inventory management backend.

This package provides the configuration and database bootstrap shared by
the backend's web application and command-line tools.
"""

__version__ = "0.1.0"

from stock_manager.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
