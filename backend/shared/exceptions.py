"""
Base exception classes for the storefront backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status and renders the error
envelope, so services only ever raise.
"""

from typing import Optional, Any


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StorefrontError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(StorefrontError):
    """Authentication failed (invalid, missing or expired credentials)."""

    status_code = 401


class NotFoundError(StorefrontError):
    """Resource not found."""

    status_code = 404


class ConflictError(StorefrontError):
    """Resource already exists."""

    status_code = 409


class ExternalServiceError(StorefrontError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class InternalError(StorefrontError):
    """Unexpected failure. Detail stays in server logs."""

    status_code = 500
