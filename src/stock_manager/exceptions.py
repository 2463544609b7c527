"""Custom exceptions for the Stock Manager backend."""


class StockManagerError(Exception):
    """Base exception for all Stock Manager errors."""


class ConfigurationError(StockManagerError):
    """Exception raised for missing or malformed configuration."""


class DatabaseConnectionError(StockManagerError):
    """Exception raised when the database cannot be reached."""
