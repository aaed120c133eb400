"""
asyncpg pool for the teacher catalogue
"""
import asyncpg
from typing import Optional, List, Dict, Any
import logging

from ...config import settings

logger = logging.getLogger(__name__)


class DatabaseNotConnected(RuntimeError):
    pass


class Database:
    """Read-only access to users, teacher_profiles and subjects; rows come back as dicts"""

    def __init__(self, url: Optional[str] = None, pool_size: Optional[int] = None):
        self.url = url or settings.DATABASE_URL
        self.pool_size = pool_size or settings.DB_POOL_SIZE
        self.pool: Optional[asyncpg.Pool] = None

    async def connect(self):
        try:
            self.pool = await asyncpg.create_pool(
                self.url,
                min_size=1,
                max_size=self.pool_size,
                command_timeout=60,
            )
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Teacher catalogue database unreachable: {e}")
            raise
        logger.info(f"Teacher catalogue pool ready ({self.pool_size} connections max)")

    async def disconnect(self):
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Teacher catalogue pool closed")

    def _require_pool(self) -> asyncpg.Pool:
        if self.pool is None:
            raise DatabaseNotConnected("Teacher catalogue queried before connect()")
        return self.pool

    async def fetch_one(self, query: str, *args) -> Optional[Dict[str, Any]]:
        async with self._require_pool().acquire() as conn:
            row = await conn.fetchrow(query, *args)
            return dict(row) if row else None

    async def fetch_all(self, query: str, *args) -> List[Dict[str, Any]]:
        async with self._require_pool().acquire() as conn:
            rows = await conn.fetch(query, *args)
            return [dict(row) for row in rows]


db = Database()
