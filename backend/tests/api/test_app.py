"""Tests for application startup."""

import os
import pytest
from unittest.mock import patch

from fastapi.testclient import TestClient

from api.app import create_app, seed_demo_account
from api.dependencies import get_container


class TestDemoAccountSeeding:
    @pytest.mark.asyncio
    async def test_no_demo_account_by_default(self):
        await seed_demo_account()
        assert len(get_container().auth._accounts) == 0

    @pytest.mark.asyncio
    async def test_seeds_configured_account_once(self):
        with patch.dict(os.environ, {
            "DEMO_ACCOUNT_EMAIL": "admin@x.com",
            "DEMO_ACCOUNT_PASSWORD": "adminpass1",
        }):
            await seed_demo_account()
            await seed_demo_account()

        assert len(get_container().auth._accounts) == 1

    @pytest.mark.asyncio
    async def test_invalid_demo_account_does_not_block_startup(self):
        """A demo password that fails policy is logged and skipped."""
        with patch.dict(os.environ, {
            "DEMO_ACCOUNT_EMAIL": "admin@x.com",
            "DEMO_ACCOUNT_PASSWORD": "short",
        }):
            await seed_demo_account()

        assert len(get_container().auth._accounts) == 0

    def test_lifespan_seeds_account(self):
        """The demo account can log in as soon as the app has started."""
        with patch.dict(os.environ, {
            "DEMO_ACCOUNT_EMAIL": "admin@x.com",
            "DEMO_ACCOUNT_PASSWORD": "adminpass1",
        }):
            with TestClient(create_app()) as client:
                response = client.post(
                    "/api/auth/login", json={"email": "admin@x.com", "password": "adminpass1"}
                )

        assert response.status_code == 200
        assert response.json()["user"]["firstName"] == "Admin"


class TestRoutes:
    def test_routes_registered(self):
        paths = {route.path for route in create_app().routes}
        for path in [
            "/api/health",
            "/api/ready",
            "/api/auth/signup",
            "/api/auth/login",
            "/api/auth/logout",
            "/api/auth/me",
            "/api/catalog",
            "/api/catalog/refresh",
            "/api/catalog/cache",
            "/api/catalog/search",
            "/api/products",
            "/api/gemini/generate-image",
            "/api/gemini/enhance-image",
            "/api/gemini/analyze-image",
            "/api/gemini/optimize-text",
        ]:
            assert path in paths

    def test_docs_hidden_unless_debug(self):
        assert "/api/docs" not in {route.path for route in create_app().routes}
