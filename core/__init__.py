"""
Core utilities and configuration for the Chamber catalog.

This package provides foundational components used by the importers:

Modules:
    config: Application configuration and environment variable management
    database: Database engine and session management
    exceptions: Custom exception hierarchy for error handling
    logging: Logging configuration and utilities

Usage:
    from core.config import settings
    from core.database import get_db_session
    from core.exceptions import MalformedInputError, CommitError
    from core.logging import setup_logging

Example:
    # Initialize logging
    setup_logging()

    # Get database session
    async with get_db_session() as session:
        # Perform database operations
        pass
"""

__all__ = [
    "settings",
    "get_db_session",
    "setup_logging",
    # Exceptions
    "ImportException",
    "SourceFileError",
    "MalformedInputError",
    "RecordValidationError",
    "PersistenceError",
    "CommitError",
]

from core.config import settings
from core.database import get_db_session
from core.logging import setup_logging
from core.exceptions import (
    ImportException,
    SourceFileError,
    MalformedInputError,
    RecordValidationError,
    PersistenceError,
    CommitError,
)
