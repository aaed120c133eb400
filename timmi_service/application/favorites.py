"""
Favorites store - per-client bookmarks persisted to the key-value store
"""
from datetime import datetime, timezone
from typing import List, Optional
import json
import logging

from ..domain.models import FavoriteEntry, FavoriteType
from ..domain.repositories import IKeyValueStore
from .locks import key_lock

logger = logging.getLogger(__name__)


def favorites_key(client_id: str, prefix: str = "") -> str:
    """Storage key holding a client's favorites"""
    key = f"favorites:{client_id}"
    return f"{prefix}:{key}" if prefix else key


def entry_to_dict(entry: FavoriteEntry) -> dict:
    return {
        "id": entry.id,
        "type": entry.type.value,
        "title": entry.title,
        "addedAt": entry.added_at.isoformat(),
    }


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, including the trailing "Z" browsers emit"""
    if isinstance(value, str) and value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _dict_to_entry(data: dict) -> FavoriteEntry:
    return FavoriteEntry(
        id=int(data["id"]),
        type=FavoriteType(data["type"]),
        title=str(data["title"]),
        added_at=parse_timestamp(data["addedAt"]),
    )


def serialize_favorites(entries: List[FavoriteEntry]) -> str:
    return json.dumps([entry_to_dict(e) for e in entries], ensure_ascii=False)


def deserialize_favorites(raw: str) -> List[FavoriteEntry]:
    """
    Parse a stored favorites list

    Raises:
        ValueError: If the payload is not a well-formed favorites list
    """
    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("favorites payload must be a list")
        return [_dict_to_entry(item) for item in data]
    except (KeyError, TypeError, json.JSONDecodeError) as e:
        raise ValueError(f"Malformed favorites payload: {e}") from e


class FavoritesStore:
    """
    Ordered favorites list keyed by (id, type)

    Every mutation holds the key's lock while it reloads the list, applies the
    change and writes the full list back, so concurrent requests from one client
    never overwrite each other.
    """

    def __init__(self, storage: IKeyValueStore, key: str):
        self.storage = storage
        self.key = key
        self._entries: List[FavoriteEntry] = []

    async def load(self) -> "FavoritesStore":
        """Load favorites from storage, starting empty when absent or corrupt"""
        raw = await self.storage.get(self.key)
        if not raw:
            self._entries = []
            return self

        try:
            self._entries = deserialize_favorites(raw)
        except ValueError as e:
            logger.warning(f"Discarding corrupt favorites under {self.key}: {e}")
            self._entries = []
        return self

    async def _persist(self):
        await self.storage.set(self.key, serialize_favorites(self._entries))

    @property
    def entries(self) -> List[FavoriteEntry]:
        return list(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    def _find(self, item_id: int, item_type: FavoriteType) -> Optional[FavoriteEntry]:
        item_type = FavoriteType(item_type)
        for entry in self._entries:
            if entry.id == item_id and entry.type == item_type:
                return entry
        return None

    def _append(self, item_id: int, item_type: FavoriteType, title: str) -> FavoriteEntry:
        entry = FavoriteEntry(
            id=item_id,
            type=FavoriteType(item_type),
            title=title,
            added_at=datetime.now(timezone.utc),
        )
        self._entries.append(entry)
        return entry

    def _discard(self, entry: FavoriteEntry):
        self._entries = [e for e in self._entries if e is not entry]

    def is_favorite(self, item_id: int, item_type: FavoriteType) -> bool:
        """Check if (id, type) is bookmarked"""
        return self._find(item_id, item_type) is not None

    def by_type(self, item_type: FavoriteType) -> List[FavoriteEntry]:
        """Favorites of one type, in insertion order"""
        item_type = FavoriteType(item_type)
        return [entry for entry in self._entries if entry.type == item_type]

    async def add(self, item_id: int, item_type: FavoriteType, title: str) -> FavoriteEntry:
        """Bookmark an item; an existing bookmark is kept as is"""
        async with key_lock(self.key):
            await self.load()
            existing = self._find(item_id, item_type)
            if existing:
                return existing

            entry = self._append(item_id, item_type, title)
            await self._persist()
            return entry

    async def remove(self, item_id: int, item_type: FavoriteType) -> bool:
        """
        Remove a bookmark

        Returns:
            True if something was removed, False if it was not bookmarked
        """
        async with key_lock(self.key):
            await self.load()
            existing = self._find(item_id, item_type)
            if not existing:
                return False

            self._discard(existing)
            await self._persist()
            return True

    async def toggle(self, item_id: int, item_type: FavoriteType, title: str) -> bool:
        """
        Flip the bookmark state of an item

        Returns:
            True if the item is now a favorite, False if it was removed
        """
        async with key_lock(self.key):
            await self.load()
            existing = self._find(item_id, item_type)
            if existing:
                self._discard(existing)
            else:
                self._append(item_id, item_type, title)
            await self._persist()
            return existing is None

    async def clear(self):
        """Remove every bookmark"""
        async with key_lock(self.key):
            self._entries = []
            await self._persist()
