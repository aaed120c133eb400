import asyncio
import json
import unittest
from datetime import datetime, timezone

from timmi_service.domain.models import FavoriteType
from timmi_service.application.favorites import (
    FavoritesStore, deserialize_favorites, favorites_key, parse_timestamp
)
from timmi_service.infrastructure.storage import InMemoryStore


class YieldingStore(InMemoryStore):
    """In-memory store that gives up control on every call, like a network round trip"""

    async def get(self, key):
        await asyncio.sleep(0)
        return await super().get(key)

    async def set(self, key, value):
        await asyncio.sleep(0)
        await super().set(key, value)


class TestFavoritesKey(unittest.TestCase):
    """Tests for storage key naming."""

    def test_key_without_prefix(self):
        self.assertEqual(favorites_key("abc"), "favorites:abc")

    def test_key_with_prefix(self):
        self.assertEqual(favorites_key("abc", "timmi"), "timmi:favorites:abc")


class TestFavoritesStore(unittest.IsolatedAsyncioTestCase):
    """Tests for FavoritesStore."""

    async def asyncSetUp(self):
        self.storage = InMemoryStore()
        self.store = await FavoritesStore(self.storage, "favorites:test").load()

    async def test_starts_empty(self):
        """Should load an empty list when nothing is stored."""
        self.assertEqual(self.store.count, 0)
        self.assertEqual(self.store.entries, [])

    async def test_add_is_idempotent(self):
        """Should not duplicate an item added twice."""
        first = await self.store.add(1, FavoriteType.ARTICLE, "Premier article")
        second = await self.store.add(1, FavoriteType.ARTICLE, "Autre titre")

        self.assertEqual(self.store.count, 1)
        self.assertEqual(first, second)
        self.assertEqual(self.store.entries[0].title, "Premier article")

    async def test_same_id_different_type(self):
        """Should treat (id, type) as the identity."""
        await self.store.add(1, FavoriteType.ARTICLE, "Article")
        await self.store.add(1, FavoriteType.SERVICE, "Service")
        self.assertEqual(self.store.count, 2)

    async def test_toggle_law(self):
        """Should return to the original state after two toggles."""
        await self.store.add(5, FavoriteType.CONTENT, "Vidéo")
        before = [e.key for e in self.store.entries]

        await self.store.toggle(9, FavoriteType.ARTICLE, "Article")
        await self.store.toggle(9, FavoriteType.ARTICLE, "Article")

        self.assertEqual([e.key for e in self.store.entries], before)

    async def test_membership_after_toggle(self):
        """Should report the item as favorite right after toggling it on."""
        added = await self.store.toggle(3, FavoriteType.SERVICE, "Service")

        self.assertTrue(added)
        self.assertTrue(self.store.is_favorite(3, FavoriteType.SERVICE))

        removed = await self.store.toggle(3, FavoriteType.SERVICE, "Service")
        self.assertFalse(removed)
        self.assertFalse(self.store.is_favorite(3, FavoriteType.SERVICE))

    async def test_clear_is_idempotent(self):
        """Should leave an empty store after clearing twice."""
        await self.store.add(1, FavoriteType.ARTICLE, "Article")
        await self.store.clear()
        await self.store.clear()

        self.assertEqual(self.store.count, 0)
        reloaded = await FavoritesStore(self.storage, "favorites:test").load()
        self.assertEqual(reloaded.count, 0)

    async def test_by_type_keeps_insertion_order(self):
        """Should return entries of one type in the order they were added."""
        await self.store.add(3, FavoriteType.ARTICLE, "C")
        await self.store.add(1, FavoriteType.SERVICE, "S")
        await self.store.add(2, FavoriteType.ARTICLE, "B")

        articles = self.store.by_type(FavoriteType.ARTICLE)
        self.assertEqual([e.id for e in articles], [3, 2])

    async def test_remove_missing(self):
        """Should report False when removing an absent item."""
        self.assertFalse(await self.store.remove(42, FavoriteType.ARTICLE))

    async def test_reload_sees_mutations(self):
        """Should persist every mutation to storage."""
        await self.store.add(1, FavoriteType.ARTICLE, "Article")
        await self.store.add(2, FavoriteType.CONTENT, "Contenu")
        await self.store.remove(1, FavoriteType.ARTICLE)

        reloaded = await FavoritesStore(self.storage, "favorites:test").load()
        self.assertEqual([e.key for e in reloaded.entries], [(2, FavoriteType.CONTENT)])

    async def test_stored_format(self):
        """Should store a JSON list with addedAt timestamps."""
        await self.store.add(7, FavoriteType.SERVICE, "Cours de soutien")
        data = json.loads(await self.storage.get("favorites:test"))

        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["id"], 7)
        self.assertEqual(data[0]["type"], "service")
        self.assertEqual(data[0]["title"], "Cours de soutien")
        self.assertIn("addedAt", data[0])

    async def test_corrupt_payload_starts_empty(self):
        """Should recover from unreadable stored data."""
        await self.storage.set("favorites:test", "{not json")

        with self.assertLogs("timmi_service.application.favorites", level="WARNING"):
            store = await FavoritesStore(self.storage, "favorites:test").load()

        self.assertEqual(store.count, 0)


class TestConcurrentRequests(unittest.IsolatedAsyncioTestCase):
    """Tests for overlapping requests from one client."""

    async def asyncSetUp(self):
        self.storage = YieldingStore()

    async def request(self, item_id):
        store = await FavoritesStore(self.storage, "favorites:test").load()
        await store.toggle(item_id, FavoriteType.ARTICLE, f"Article {item_id}")

    async def test_parallel_toggles_keep_both(self):
        """Should keep the items of two requests that ran at the same time."""
        await asyncio.gather(self.request(1), self.request(2))

        reloaded = await FavoritesStore(self.storage, "favorites:test").load()
        self.assertEqual(sorted(e.id for e in reloaded.entries), [1, 2])

    async def test_parallel_add_and_remove(self):
        """Should apply a removal on top of a concurrent add."""
        seeded = await FavoritesStore(self.storage, "favorites:test").load()
        await seeded.add(1, FavoriteType.ARTICLE, "Article 1")

        async def remove():
            store = await FavoritesStore(self.storage, "favorites:test").load()
            await store.remove(1, FavoriteType.ARTICLE)

        await asyncio.gather(self.request(2), remove())

        reloaded = await FavoritesStore(self.storage, "favorites:test").load()
        self.assertEqual([e.key for e in reloaded.entries], [(2, FavoriteType.ARTICLE)])


class TestParseTimestamp(unittest.TestCase):
    """Tests for addedAt parsing."""

    def test_zulu_suffix(self):
        parsed = parse_timestamp("2025-01-01T10:00:00.000Z")
        self.assertEqual(parsed, datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))

    def test_offset(self):
        parsed = parse_timestamp("2025-01-01T12:00:00+02:00")
        self.assertEqual(parsed, datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))

    def test_naive(self):
        self.assertIsNone(parse_timestamp("2025-01-01T10:00:00").tzinfo)


class TestDeserializeFavorites(unittest.TestCase):
    """Tests for payload parsing."""

    def test_browser_timestamps(self):
        """Should accept the Z-suffixed timestamps written by browsers."""
        entries = deserialize_favorites(
            '[{"id": 1, "type": "article", "title": "x", "addedAt": "2025-01-01T10:00:00.000Z"}]'
        )
        self.assertEqual(entries[0].added_at, datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))

    def test_rejects_non_list(self):
        with self.assertRaises(ValueError):
            deserialize_favorites('{"id": 1}')

    def test_rejects_unknown_type(self):
        with self.assertRaises(ValueError):
            deserialize_favorites('[{"id": 1, "type": "video", "title": "x", "addedAt": "2025-01-01T00:00:00"}]')


if __name__ == "__main__":
    unittest.main()
