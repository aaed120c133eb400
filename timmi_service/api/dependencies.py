"""
FastAPI dependencies
"""
from fastapi import Depends, Header
from typing import Optional

from ..config import settings
from ..domain.repositories import IKeyValueStore, ITeacherRepository
from ..application.favorites import FavoritesStore, favorites_key
from ..application.themes import ThemeManager
from ..infrastructure.storage import get_store
from ..infrastructure.database.connection import db
from ..infrastructure.database.repositories import PostgresTeacherRepository
from ..infrastructure.fixtures import FixtureTeacherRepository

ANONYMOUS_CLIENT = "anonymous"

fixture_repository = FixtureTeacherRepository(settings.TEACHERS_FIXTURE_PATH or None)


async def get_client_id(x_client_id: Optional[str] = Header(None)) -> str:
    """Identify the browser whose local state is being read"""
    return x_client_id.strip() if x_client_id and x_client_id.strip() else ANONYMOUS_CLIENT


async def get_teacher_repository() -> ITeacherRepository:
    """Get teacher repository dependency"""
    if settings.TEACHER_SOURCE == "postgres":
        return PostgresTeacherRepository(db)
    return fixture_repository


async def get_favorites_store(
    client_id: str = Depends(get_client_id),
    storage: IKeyValueStore = Depends(get_store)
) -> FavoritesStore:
    """Get the client's favorites, loaded from storage"""
    store = FavoritesStore(storage, favorites_key(client_id, settings.STORAGE_KEY_PREFIX))
    return await store.load()


async def get_theme_manager(
    client_id: str = Depends(get_client_id),
    storage: IKeyValueStore = Depends(get_store)
) -> ThemeManager:
    """Get theme manager dependency"""
    return ThemeManager(
        storage,
        client_id,
        default_key=settings.THEME_DEFAULT,
        allow_change=settings.THEME_ALLOW_CHANGE,
        default_dark=settings.THEME_DEFAULT_DARK_MODE,
        recent_limit=settings.RECENT_THEMES_LIMIT,
        key_prefix=settings.STORAGE_KEY_PREFIX,
    )
