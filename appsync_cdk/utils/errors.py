"""
Error handling utilities for stack declaration.

Provides standardized declaration errors with error codes. Provisioning and
request-time errors are reported by CloudFormation and AppSync, not here.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Application error with error code and message.

    Used to report structured errors from ``cdk synth``.
    """

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "errorCode": self.error_code,
            "message": self.message,
            **self.details,
        }


class DeclarationError(AppError):
    """Raised when the declaration graph or a declaration is inconsistent."""


# Common error codes
class ErrorCode:
    """Standard error codes for the application."""

    # Configuration errors
    INVALID_ENTITY_NAME = "INVALID_ENTITY_NAME"

    # Dependency graph errors
    DUPLICATE_DECLARATION = "DUPLICATE_DECLARATION"
    UNKNOWN_DECLARATION = "UNKNOWN_DECLARATION"
    DEPENDENCY_CYCLE = "DEPENDENCY_CYCLE"

    # Resolver errors
    DUPLICATE_RESOLVER = "DUPLICATE_RESOLVER"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    KEY_MISMATCH = "KEY_MISMATCH"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


def handle_error(error: Exception) -> Dict[str, Any]:
    """
    Convert exception to standardized error response.

    Args:
        error: Exception to handle

    Returns:
        Error dictionary suitable for a structured log entry
    """
    if isinstance(error, AppError):
        return error.to_dict()

    return {
        "errorCode": ErrorCode.INTERNAL_ERROR,
        "message": f"Unexpected error while declaring the stack: {error}",
    }
