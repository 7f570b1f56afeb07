"""
Custom exceptions for the catalog importer with structured error context.

Each exception carries context information (file path, entity type,
record index, ...) so failures can be logged and reported without
re-reading the input.

Exception Hierarchy:
    ImportException (base)
    ├── SourceFileError
    ├── MalformedInputError
    │   └── RecordValidationError
    └── PersistenceError
        └── CommitError

A missing input file and an unresolved reference (unknown cartridge,
unknown projectile) are not errors and have no exception type.
"""

from typing import Optional, Dict, Any
from datetime import datetime


class ImportException(Exception):
    """
    Base exception for all import-related errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (file_path, entity_type, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.utcnow()

        self.context["error_timestamp"] = self.timestamp.isoformat()

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/storage."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Input Errors
# ============================================================================

class SourceFileError(ImportException):
    """
    Raised when an input file exists but cannot be read.

    Context should include:
        - file_path: Path to the input file
    """
    pass


class MalformedInputError(ImportException):
    """
    Raised when an input file is not a JSON array of objects.

    Fatal for the whole file: nothing from the file is staged.

    Context should include:
        - file_path: Path to the input file
        - entity_type: Entity type the file was imported as
    """
    pass


class RecordValidationError(MalformedInputError):
    """
    Raised when a record does not match the expected record shape.

    Context should include:
        - file_path: Path to the input file
        - record_index: Zero-based position of the record in the file
        - errors: Field-level errors reported by the schema
    """
    pass


# ============================================================================
# Persistence Errors
# ============================================================================

class PersistenceError(ImportException):
    """Base exception for store failures during an import."""
    pass


class CommitError(PersistenceError):
    """
    Raised when the batch commit for a file fails.

    Everything staged for the file is rolled back.

    Context should include:
        - entity_type: Entity type being imported
        - records_staged: Number of records staged before the commit
    """
    pass
