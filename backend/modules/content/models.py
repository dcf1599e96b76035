"""
Generative content module data models.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from shared.models import CamelModel


class FieldType(str, Enum):
    """Product fields the text optimizer knows how to rewrite."""

    NAME = "name"
    DESCRIPTION = "description"
    TAGS = "tags"
    DEFAULT = "default"


class ImageOptions(CamelModel):
    """Photo styling for generated product shots."""

    background: str = "pure white professional e-commerce background"
    style: str = "professional product photography"
    lighting: str = "studio lighting with soft shadows"
    angle: str = "front facing view"
    quality: str = "high resolution, sharp focus"


class GenerateImageRequest(CamelModel):
    prompt: str = Field(..., min_length=1)
    options: Optional[ImageOptions] = None
    generation_config: Optional[dict[str, Any]] = None
    safety_settings: Optional[list[dict[str, str]]] = None


class GenerateVariationsRequest(CamelModel):
    prompt: str = Field(..., min_length=1)
    count: int = Field(default=3, ge=1, le=3)


class EnhanceImageRequest(CamelModel):
    image_base64: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    generation_config: Optional[dict[str, Any]] = None
    safety_settings: Optional[list[dict[str, str]]] = None


class AnalyzeImageRequest(CamelModel):
    image_base64: str = Field(..., min_length=1)
    prompt: Optional[str] = None


class OptimizeTextRequest(CamelModel):
    text: str = Field(..., min_length=1)
    field_type: FieldType = FieldType.DESCRIPTION


class GeneratedImage(CamelModel):
    """A generated image as a data URI."""

    mime_type: str
    data: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class ProductAnalysis(CamelModel):
    """Product details suggested from a photo."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    description: str = ""
    suggested_price: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)

    @field_validator("tags", "features", mode="before")
    @classmethod
    def split_comma_list(cls, value: Any) -> Any:
        # Models sometimes answer "a, b" instead of ["a", "b"]
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class ImageResponse(CamelModel):
    success: bool = True
    image: str
    mime_type: str


class VariationsResponse(CamelModel):
    success: bool = True
    images: list[str]


class AnalysisResponse(CamelModel):
    success: bool = True
    product: ProductAnalysis


class TextResponse(CamelModel):
    success: bool = True
    text: str
