"""
Generative content module exceptions.
"""

from typing import Any, Optional

from shared.exceptions import ExternalServiceError


class GeminiNotConfiguredError(ExternalServiceError):
    """Raised when no Gemini API key is configured."""

    status_code = 503

    def __init__(self):
        super().__init__(
            "Gemini API is not configured on server",
            service="gemini",
            code="GEMINI_NOT_CONFIGURED",
        )


class GeminiRequestError(ExternalServiceError):
    """Raised when a Gemini call fails or times out."""

    def __init__(self, message: str, status: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        super().__init__(
            message,
            service="gemini",
            code="GEMINI_REQUEST_ERROR",
            details={"status": status, **(details or {})},
        )


class EmptyGenerationError(ExternalServiceError):
    """Raised when a response has no usable image or text part."""

    def __init__(self, expected: str):
        super().__init__(
            f"No {expected} found in response",
            service="gemini",
            code="EMPTY_GENERATION",
            details={"expected": expected},
        )
