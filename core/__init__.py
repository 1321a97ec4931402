"""
Core utilities and configuration for the JSONPlaceholder mirror.

This package provides foundational components used throughout the service:

Modules:
    config: Application configuration and environment variable management
    database: Async engine and session management (Database)
    exceptions: Custom exception hierarchy for error handling
    logging: Logging configuration and utilities

Usage:
    from core.config import settings
    from core.database import Database
    from core.exceptions import RemoteError, StorageError
    from core.logging import setup_logging

Example:
    setup_logging()

    database = Database(settings.database_url)
    await database.create_all()
    async with database.session_maker() as session:
        pass
"""

__all__ = [
    "settings",
    "Database",
    "setup_logging",
    # Exceptions
    "ServiceError",
    "ValidationError",
    "RemoteError",
    "StorageError",
    "NotFoundError",
]
