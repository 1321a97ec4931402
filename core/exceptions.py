"""
Custom exceptions for the fetch-and-store pipeline with structured error context.

Every exception carries a human-readable message, a context dictionary for
logging, and the HTTP status the API layer answers with.

Exception Hierarchy:
    ServiceError (base, 500)
    ├── ValidationError (400)
    ├── RemoteError (500)
    ├── StorageError (500)
    └── NotFoundError (404)
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ServiceError(Exception):
    """
    Base exception for all service errors.

    Attributes:
        message: Human-readable error message, returned to API clients as-is
        context: Additional context information (endpoint, params, etc.)
        original_exception: The original exception that was caught (if any)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)

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
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


class ValidationError(ServiceError):
    """
    Raised when a request names an unsupported endpoint selector.

    Context should include:
        - endpoint: The rejected selector
        - allowed: The supported selectors
    """

    status_code = 400


class RemoteError(ServiceError):
    """
    Raised when the external API answers with a non-success status, the
    transport fails, or the body is not JSON.

    Context should include:
        - api_url: The URL that failed
        - status_code: HTTP status code (if a response was received)
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
        remote_status: Optional[int] = None
    ):
        super().__init__(message, context, original_exception)
        self.remote_status = remote_status
        if remote_status is not None:
            self.context["status_code"] = remote_status


class StorageError(ServiceError):
    """
    Raised when reading or writing the database fails.

    Context should include:
        - operation: Type of database operation (INSERT, UPSERT, DELETE, SELECT)
        - table_name: Name of the table
    """

    status_code = 500


class NotFoundError(ServiceError):
    """Raised when a delete-by-id target does not exist."""

    status_code = 404
