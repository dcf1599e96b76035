"""
Generative content module.

Server-side proxy for Gemini product imagery and copywriting.

Public API:
- IContentService: Interface for content generation
- GeminiService: Gemini REST implementation
"""

from .interfaces import IContentService
from .models import (
    FieldType,
    ImageOptions,
    GeneratedImage,
    ProductAnalysis,
)
from .service import GeminiService
from .exceptions import (
    GeminiNotConfiguredError,
    GeminiRequestError,
    EmptyGenerationError,
)

__all__ = [
    # Interfaces
    "IContentService",
    # Models
    "FieldType",
    "ImageOptions",
    "GeneratedImage",
    "ProductAnalysis",
    # Implementations
    "GeminiService",
    # Exceptions
    "GeminiNotConfiguredError",
    "GeminiRequestError",
    "EmptyGenerationError",
]
