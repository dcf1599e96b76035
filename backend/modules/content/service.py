"""
Gemini content service.

Calls the Generative Language REST API directly with httpx. Inbound
images may be raw base64 or data URIs; outbound images are data URIs.
"""

import json
import logging
import re
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .exceptions import EmptyGenerationError, GeminiNotConfiguredError, GeminiRequestError
from .models import FieldType, GeneratedImage, ImageOptions, ProductAnalysis
from .prompts import (
    ANALYZE_PRODUCT_PROMPT,
    VARIATION_STYLES,
    build_optimize_prompt,
    build_product_prompt,
)

logger = logging.getLogger(__name__)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,")
JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)

IMAGE_GENERATION_CONFIG: dict[str, Any] = {
    "temperature": 0.4,
    "topK": 32,
    "topP": 1,
    "maxOutputTokens": 4096,
}

TEXT_GENERATION_CONFIG: dict[str, Any] = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

DEFAULT_SAFETY_SETTINGS: list[dict[str, str]] = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]


def strip_data_uri(image: str) -> str:
    """Return the bare base64 payload of a data URI or base64 string."""
    return DATA_URI_PREFIX.sub("", image)


def extract_image(payload: dict) -> GeneratedImage:
    for part in _parts(payload):
        inline = part.get("inlineData") or part.get("inline_data")
        if inline and inline.get("data"):
            return GeneratedImage(
                mime_type=inline.get("mimeType") or inline.get("mime_type") or "image/png",
                data=inline["data"],
            )
    raise EmptyGenerationError("image")


def extract_text(payload: dict) -> str:
    texts = [part["text"] for part in _parts(payload) if part.get("text")]
    if not texts:
        raise EmptyGenerationError("text")
    return "".join(texts).strip()


def parse_analysis(text: str) -> ProductAnalysis:
    """Parse the first JSON object in a model reply."""
    match = JSON_OBJECT.search(text)
    if not match:
        raise EmptyGenerationError("product data")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise EmptyGenerationError("product data") from e
    try:
        return ProductAnalysis.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Unusable product analysis from Gemini: {e.error_count()} invalid fields")
        raise EmptyGenerationError("product data") from e


def _parts(payload: dict) -> list[dict]:
    candidates = payload.get("candidates") or []
    if not candidates:
        return []
    return (candidates[0].get("content") or {}).get("parts") or []


class GeminiService:
    """
    Implementation of IContentService backed by the Gemini REST API.

    One model serves image generation and editing, another serves
    text and image understanding.
    """

    def __init__(
        self,
        api_key: str,
        image_model: str = "gemini-2.5-flash-image",
        text_model: str = "gemini-2.0-flash-exp",
        timeout: float = 60.0,
    ):
        self._api_key = api_key
        self._image_model = image_model
        self._text_model = text_model
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate_image(
        self,
        prompt: str,
        options: Optional[ImageOptions] = None,
        generation_config: Optional[dict[str, Any]] = None,
        safety_settings: Optional[list[dict[str, str]]] = None,
    ) -> GeneratedImage:
        logger.info(f"Generating image for prompt: {prompt[:80]}")
        payload = await self._generate(
            self._image_model,
            [{"text": build_product_prompt(prompt, options)}],
            {**IMAGE_GENERATION_CONFIG, **(generation_config or {})},
            safety_settings or DEFAULT_SAFETY_SETTINGS,
        )
        return extract_image(payload)

    async def generate_variations(self, prompt: str, count: int = 3) -> list[GeneratedImage]:
        """Generate up to three shots of one product in preset styles."""
        images = []
        for options in VARIATION_STYLES[:count]:
            images.append(await self.generate_image(prompt, options))
        return images

    async def enhance_image(
        self,
        image_base64: str,
        instructions: str,
        generation_config: Optional[dict[str, Any]] = None,
        safety_settings: Optional[list[dict[str, str]]] = None,
    ) -> GeneratedImage:
        logger.info(f"Enhancing image: {instructions[:80]}")
        parts = [
            {"inlineData": {"mimeType": "image/png", "data": strip_data_uri(image_base64)}},
            {"text": instructions},
        ]
        payload = await self._generate(
            self._image_model,
            parts,
            {**IMAGE_GENERATION_CONFIG, **(generation_config or {})},
            safety_settings or DEFAULT_SAFETY_SETTINGS,
        )
        return extract_image(payload)

    async def analyze_image(self, image_base64: str, prompt: Optional[str] = None) -> ProductAnalysis:
        parts = [
            {"text": prompt or ANALYZE_PRODUCT_PROMPT},
            {"inlineData": {"mimeType": "image/png", "data": strip_data_uri(image_base64)}},
        ]
        payload = await self._generate(self._text_model, parts, TEXT_GENERATION_CONFIG)
        return parse_analysis(extract_text(payload))

    async def optimize_text(self, text: str, field_type: FieldType = FieldType.DESCRIPTION) -> str:
        payload = await self._generate(
            self._text_model,
            [{"text": build_optimize_prompt(text, field_type)}],
            {**TEXT_GENERATION_CONFIG, "maxOutputTokens": 512},
        )
        return extract_text(payload)

    async def _generate(
        self,
        model: str,
        parts: list[dict[str, Any]],
        generation_config: dict[str, Any],
        safety_settings: Optional[list[dict[str, str]]] = None,
    ) -> dict:
        if not self.is_configured:
            raise GeminiNotConfiguredError()

        body: dict[str, Any] = {
            "contents": [{"parts": parts}],
            "generationConfig": generation_config,
        }
        if safety_settings:
            body["safetySettings"] = safety_settings

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{GEMINI_API_URL}/{model}:generateContent",
                    headers={"Content-Type": "application/json", "X-goog-api-key": self._api_key},
                    json=body,
                )
        except httpx.TimeoutException as e:
            raise GeminiRequestError(f"Gemini request timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise GeminiRequestError(f"Gemini request failed: {e}") from e

        if response.is_error:
            try:
                message = response.json().get("error", {}).get("message", "")
            except ValueError:
                message = response.text
            logger.error(f"Gemini API error ({response.status_code}): {message}")
            raise GeminiRequestError(
                message or f"Gemini API error {response.status_code}",
                status=response.status_code,
            )
        return response.json()
