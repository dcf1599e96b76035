"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone

from argon2 import PasswordHasher

from api.dependencies import reset_container
from modules.auth.passwords import PasswordHashing
from modules.auth.service import AuthService
from modules.auth.store import InMemoryAccountStore, InMemorySessionStore
from modules.catalog.cache import InMemoryDurableStore
from modules.catalog.exceptions import CatalogFetchError
from modules.catalog.models import CatalogQuery, CatalogSource, Product, ProductCollection
from modules.catalog.service import CatalogService
from shared.config import get_settings


class FakeClock:
    """Controllable clock; call it to read the time, ``advance`` to move it."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


class FakeProductSource:
    """Stands in for Shopify. Counts fetches; raises ``error`` when set."""

    def __init__(self, clock, products=None):
        self._clock = clock
        self.products = products if products is not None else [
            Product(id="gid://shopify/Product/1", name="Remote Hoodie", price=50, category="hoodies", handle="remote-hoodie"),
            Product(id="gid://shopify/Product/2", name="Remote Tee", price=25, category="tees", handle="remote-tee"),
        ]
        self.by_handle: dict[str, Product] = {}
        self.calls: list[CatalogQuery] = []
        self.handle_calls: list[str] = []
        self.error: Exception | None = None

    async def fetch_products(self, query: CatalogQuery) -> ProductCollection:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return ProductCollection(
            products=self.products[: query.first],
            fetched_at=self._clock(),
            source=CatalogSource.REMOTE,
        )

    async def fetch_product_by_handle(self, handle: str) -> Product | None:
        self.handle_calls.append(handle)
        if self.error is not None:
            raise self.error
        return self.by_handle.get(handle)


@pytest.fixture(autouse=True)
def reset_services():
    """Reset the service container and cached settings around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def passwords() -> PasswordHashing:
    """Argon2 with minimal cost so tests stay fast."""
    return PasswordHashing(PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture
def account_store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def auth_service(account_store, session_store, passwords, clock) -> AuthService:
    """Auth service over in-memory stores with a fake clock."""
    return AuthService(account_store, session_store, passwords=passwords, clock=clock)


@pytest.fixture
def signup_payload() -> dict[str, str]:
    return {
        "email": "a@x.com",
        "password": "longenough1",
        "firstName": "A",
        "lastName": "B",
    }


@pytest.fixture
def source(clock) -> FakeProductSource:
    return FakeProductSource(clock)


@pytest.fixture
def durable() -> InMemoryDurableStore:
    return InMemoryDurableStore()


@pytest.fixture
def catalog_service(source, durable, clock) -> CatalogService:
    """Catalog service over the fake source with the default 5 second TTL."""
    return CatalogService(source, durable, ttl=timedelta(seconds=5), clock=clock)


@pytest.fixture
def fetch_error() -> CatalogFetchError:
    return CatalogFetchError("timed out after 10.0s")
