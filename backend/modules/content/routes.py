"""
Generative content API endpoints.

Thin proxies over the content service; the Gemini key stays server side.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_content_service

from .interfaces import IContentService
from .models import (
    AnalysisResponse,
    AnalyzeImageRequest,
    EnhanceImageRequest,
    GenerateImageRequest,
    GenerateVariationsRequest,
    ImageResponse,
    OptimizeTextRequest,
    TextResponse,
    VariationsResponse,
)

router = APIRouter()


@router.post("/generate-image", response_model=ImageResponse)
async def generate_image(
    request: GenerateImageRequest,
    service: IContentService = Depends(get_content_service),
) -> ImageResponse:
    image = await service.generate_image(
        request.prompt,
        request.options,
        request.generation_config,
        request.safety_settings,
    )
    return ImageResponse(image=image.data_uri, mime_type=image.mime_type)


@router.post("/generate-variations", response_model=VariationsResponse)
async def generate_variations(
    request: GenerateVariationsRequest,
    service: IContentService = Depends(get_content_service),
) -> VariationsResponse:
    images = await service.generate_variations(request.prompt, request.count)
    return VariationsResponse(images=[image.data_uri for image in images])


@router.post("/enhance-image", response_model=ImageResponse)
async def enhance_image(
    request: EnhanceImageRequest,
    service: IContentService = Depends(get_content_service),
) -> ImageResponse:
    """Edit an uploaded product photo following free-form instructions."""
    image = await service.enhance_image(
        request.image_base64,
        request.instructions,
        request.generation_config,
        request.safety_settings,
    )
    return ImageResponse(image=image.data_uri, mime_type=image.mime_type)


@router.post("/analyze-image", response_model=AnalysisResponse)
async def analyze_image(
    request: AnalyzeImageRequest,
    service: IContentService = Depends(get_content_service),
) -> AnalysisResponse:
    """Suggest a name, description, price and tags from a product photo."""
    product = await service.analyze_image(request.image_base64, request.prompt)
    return AnalysisResponse(product=product)


@router.post("/optimize-text", response_model=TextResponse)
async def optimize_text(
    request: OptimizeTextRequest,
    service: IContentService = Depends(get_content_service),
) -> TextResponse:
    text = await service.optimize_text(request.text, request.field_type)
    return TextResponse(text=text)
