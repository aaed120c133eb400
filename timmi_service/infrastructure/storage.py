"""
Key-value storage for client-local state (favorites, themes)
"""
import redis.asyncio as redis
from typing import Dict, Optional
import logging

from ..config import settings
from ..domain.repositories import IKeyValueStore

logger = logging.getLogger(__name__)


class InMemoryStore(IKeyValueStore):
    """Process-local store, used when Redis is disabled or unreachable"""

    def __init__(self):
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def clear(self, key: str) -> None:
        self._data.pop(key, None)


class RedisStore(IKeyValueStore):
    """Redis-backed store; read and write errors are logged, never raised"""

    def __init__(self):
        self.redis: Optional[redis.Redis] = None

    @property
    def connected(self) -> bool:
        return self.redis is not None

    async def connect(self):
        """Connect to Redis"""
        if not settings.REDIS_ENABLED:
            logger.info("Redis storage is disabled")
            return

        try:
            self.redis = await redis.from_url(
                f"redis://{settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}",
                password=settings.REDIS_PASSWORD if settings.REDIS_PASSWORD else None,
                encoding="utf-8",
                decode_responses=True,
            )
            await self.redis.ping()
            logger.info("Connected to Redis successfully")
        except Exception as e:
            logger.warning(f"Failed to connect to Redis: {e}. Falling back to in-memory storage.")
            self.redis = None

    async def disconnect(self):
        """Disconnect from Redis"""
        if self.redis:
            await self.redis.close()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def get(self, key: str) -> Optional[str]:
        if not self.redis:
            return None

        try:
            return await self.redis.get(key)
        except Exception as e:
            logger.error(f"Error reading key {key}: {e}")
            return None

    async def set(self, key: str, value: str) -> None:
        if not self.redis:
            return

        try:
            await self.redis.set(key, value)
        except Exception as e:
            logger.error(f"Error writing key {key}: {e}")

    async def clear(self, key: str) -> None:
        if not self.redis:
            return

        try:
            await self.redis.delete(key)
        except Exception as e:
            logger.error(f"Error deleting key {key}: {e}")


# Global storage instances; the lifespan picks which one serves requests
redis_store = RedisStore()
memory_store = InMemoryStore()
_active: IKeyValueStore = memory_store


def use_store(store: IKeyValueStore):
    global _active
    _active = store


async def get_store() -> IKeyValueStore:
    """Dependency for getting the active key-value store"""
    return _active
