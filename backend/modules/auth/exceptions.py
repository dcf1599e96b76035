"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the API
error handlers into the JSON error envelope.
"""

from shared.exceptions import AuthenticationError, ConflictError, ValidationError


class MissingFieldError(ValidationError):
    """Raised when a required signup or login field is empty."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "All fields are required" if len(fields) > 1 else f"{fields[0]} is required",
            code="MISSING_FIELD",
            details={"fields": fields},
        )


class InvalidEmailError(ValidationError):
    """Raised when an email address is malformed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid email address: {reason}",
            code="INVALID_EMAIL",
        )


class WeakPasswordError(ValidationError):
    """Raised when a password does not meet the length policy."""

    def __init__(self, min_length: int):
        super().__init__(
            f"Password must be at least {min_length} characters",
            code="WEAK_PASSWORD",
            details={"min_length": min_length},
        )


class EmailTakenError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when email/password do not match an account."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class NotAuthenticatedError(AuthenticationError):
    """Raised when no session exists for the presented token."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class SessionExpiredError(AuthenticationError):
    """Raised when the presented token belongs to an expired session."""

    def __init__(self):
        super().__init__("Session expired", code="SESSION_EXPIRED")

