"""structlog setup shared by the CLI and the web application."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to drop events below ``level``.

    Args:
        level: Standard logging level name, case-insensitive.

    Raises:
        ValueError: If ``level`` is not a standard level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
