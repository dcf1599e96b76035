"""Tests for catalog cache layers."""

import pytest
from datetime import datetime, timedelta, timezone

from modules.catalog.cache import InMemoryDurableStore, JsonFileDurableStore, MemoryCatalogCache
from modules.catalog.models import CatalogSource, Product, ProductCollection


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def collection() -> ProductCollection:
    return ProductCollection(
        products=[Product(id="gid://shopify/Product/1", name="Hoodie", price=59.99, tags=["warm"])],
        has_next_page=True,
        end_cursor="cursor-1",
        fetched_at=NOW,
        source=CatalogSource.REMOTE,
    )


class TestMemoryCatalogCache:
    def test_fresh_within_ttl(self, collection):
        """Entries younger than the TTL are returned."""
        cache = MemoryCatalogCache(timedelta(seconds=5))
        cache.put("k", collection)
        assert cache.get_fresh("k", NOW + timedelta(seconds=4)) == collection

    def test_stale_at_ttl(self, collection):
        """Entries exactly TTL old are stale."""
        cache = MemoryCatalogCache(timedelta(seconds=5))
        cache.put("k", collection)
        assert cache.get_fresh("k", NOW + timedelta(seconds=5)) is None

    def test_missing_key(self):
        cache = MemoryCatalogCache(timedelta(seconds=5))
        assert cache.get_fresh("k", NOW) is None

    def test_entry_without_timestamp_is_never_fresh(self):
        """Collections without fetched_at cannot be judged fresh."""
        cache = MemoryCatalogCache(timedelta(seconds=5))
        cache.put("k", ProductCollection())
        assert cache.get_fresh("k", NOW) is None

    def test_clear(self, collection):
        cache = MemoryCatalogCache(timedelta(seconds=5))
        cache.put("a", collection)
        cache.put("b", collection)

        cache.clear()

        assert len(cache) == 0
        assert cache.ttl == timedelta(seconds=5)


class TestInMemoryDurableStore:
    def test_save_load_clear(self, collection):
        """Durable entries are kept regardless of age until cleared."""
        store = InMemoryDurableStore()
        store.save("k", collection)
        assert store.load("k") == collection

        store.clear()
        assert store.load("k") is None


class TestJsonFileDurableStore:
    def test_survives_new_instance(self, tmp_path, collection):
        """A second store over the same file sees earlier saves."""
        path = tmp_path / "catalog.json"
        JsonFileDurableStore(path).save("products_50_None", collection)

        loaded = JsonFileDurableStore(path).load("products_50_None")

        assert loaded == collection
        assert loaded.fetched_at == NOW
        assert loaded.products[0].tags == ["warm"]

    def test_save_keeps_other_keys(self, tmp_path, collection):
        """Saving one page should not drop the others."""
        store = JsonFileDurableStore(tmp_path / "catalog.json")
        store.save("a", collection)
        store.save("b", collection.model_copy(update={"end_cursor": None}))

        assert store.load("a").end_cursor == "cursor-1"
        assert store.load("b").end_cursor is None

    def test_missing_file(self, tmp_path):
        store = JsonFileDurableStore(tmp_path / "absent.json")
        assert store.load("k") is None

    def test_corrupt_file_is_ignored(self, tmp_path):
        """An unreadable file reads as empty instead of raising."""
        path = tmp_path / "catalog.json"
        path.write_text("{not json")
        assert JsonFileDurableStore(path).load("k") is None

    def test_clear_removes_file(self, tmp_path, collection):
        path = tmp_path / "catalog.json"
        store = JsonFileDurableStore(path)
        store.save("k", collection)

        store.clear()
        store.clear()

        assert not path.exists()
        assert store.load("k") is None

    def test_creates_parent_directories(self, tmp_path, collection):
        store = JsonFileDurableStore(tmp_path / "nested" / "dir" / "catalog.json")
        store.save("k", collection)
        assert store.path.exists()
