"""
Generative content module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import FieldType, GeneratedImage, ImageOptions, ProductAnalysis


@runtime_checkable
class IContentService(Protocol):
    """
    Server-side proxy for generative product imagery and copy.

    The API key never leaves the server.
    """

    @property
    def is_configured(self) -> bool:
        ...

    async def generate_image(
        self,
        prompt: str,
        options: Optional[ImageOptions] = None,
        generation_config: Optional[dict[str, Any]] = None,
        safety_settings: Optional[list[dict[str, str]]] = None,
    ) -> GeneratedImage:
        """
        Generate a product photo from a short description.

        Raises:
            GeminiNotConfiguredError: If no API key is set
            GeminiRequestError: If the remote call fails
            EmptyGenerationError: If the response carries no image
        """
        ...

    async def generate_variations(self, prompt: str, count: int = 3) -> list[GeneratedImage]:
        ...

    async def enhance_image(
        self,
        image_base64: str,
        instructions: str,
        generation_config: Optional[dict[str, Any]] = None,
        safety_settings: Optional[list[dict[str, str]]] = None,
    ) -> GeneratedImage:
        ...

    async def analyze_image(self, image_base64: str, prompt: Optional[str] = None) -> ProductAnalysis:
        ...

    async def optimize_text(self, text: str, field_type: FieldType = FieldType.DESCRIPTION) -> str:
        ...
