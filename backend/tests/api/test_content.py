"""Tests for the generative content endpoints."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from api import app
from api.dependencies import get_content_service
from modules.content.exceptions import GeminiRequestError
from modules.content.models import FieldType, GeneratedImage, ProductAnalysis
from modules.content.service import GeminiService


client = TestClient(app)


@pytest.fixture
def content_service():
    service = MagicMock()
    service.generate_image = AsyncMock(return_value=GeneratedImage(mime_type="image/png", data="QUJD"))
    service.generate_variations = AsyncMock(
        return_value=[GeneratedImage(mime_type="image/png", data="QQ=="), GeneratedImage(mime_type="image/png", data="Qg==")]
    )
    service.enhance_image = AsyncMock(return_value=GeneratedImage(mime_type="image/jpeg", data="RUZH"))
    service.analyze_image = AsyncMock(
        return_value=ProductAnalysis(name="Cozy Hoodie", suggested_price="$40", tags=["warm"])
    )
    service.optimize_text = AsyncMock(return_value="Better text")
    app.dependency_overrides[get_content_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


class TestContentEndpoints:
    def test_generate_image(self, content_service):
        response = client.post(
            "/api/gemini/generate-image",
            json={"prompt": "blue hoodie", "options": {"background": "beach"}},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "image": "data:image/png;base64,QUJD",
            "mimeType": "image/png",
        }
        args = content_service.generate_image.call_args[0]
        assert args[0] == "blue hoodie"
        assert args[1].background == "beach"

    def test_generate_image_requires_prompt(self, content_service):
        response = client.post("/api/gemini/generate-image", json={"prompt": ""})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_generate_variations(self, content_service):
        response = client.post("/api/gemini/generate-variations", json={"prompt": "cap", "count": 2})
        assert response.json()["images"] == ["data:image/png;base64,QQ==", "data:image/png;base64,Qg=="]

    def test_enhance_image(self, content_service):
        response = client.post(
            "/api/gemini/enhance-image",
            json={"imageBase64": "data:image/jpeg;base64,AAAA", "instructions": "brighter"},
        )
        assert response.status_code == 200
        assert response.json()["image"] == "data:image/jpeg;base64,RUZH"

    def test_analyze_image(self, content_service):
        response = client.post("/api/gemini/analyze-image", json={"imageBase64": "AAAA"})

        assert response.status_code == 200
        product = response.json()["product"]
        assert product["name"] == "Cozy Hoodie"
        assert product["suggestedPrice"] == "$40"

    def test_optimize_text(self, content_service):
        response = client.post("/api/gemini/optimize-text", json={"text": "hoodie", "fieldType": "name"})

        assert response.json() == {"success": True, "text": "Better text"}
        content_service.optimize_text.assert_awaited_once_with("hoodie", FieldType.NAME)

    def test_upstream_failure(self, content_service):
        """Gemini failures become a 502 envelope."""
        content_service.optimize_text.side_effect = GeminiRequestError("quota exceeded", status=429)

        response = client.post("/api/gemini/optimize-text", json={"text": "hoodie"})

        assert response.status_code == 502
        assert response.json() == {"success": False, "error": "quota exceeded", "code": "GEMINI_REQUEST_ERROR"}


class TestNotConfigured:
    def test_unconfigured_returns_503(self):
        """Without GEMINI_API_KEY every endpoint answers 503."""
        app.dependency_overrides[get_content_service] = lambda: GeminiService("")
        try:
            response = client.post("/api/gemini/optimize-text", json={"text": "hoodie"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503
        assert response.json()["code"] == "GEMINI_NOT_CONFIGURED"
