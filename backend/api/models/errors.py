"""
Error response models.

Every failure is answered with the same envelope as successes,
with ``success`` set to false.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    success: bool = False
    error: str
    code: Optional[str] = None


class ValidationErrorResponse(ErrorResponse):
    """Request validation failure, with the offending fields."""

    code: Optional[str] = "VALIDATION_ERROR"
    fields: list[str] = []
