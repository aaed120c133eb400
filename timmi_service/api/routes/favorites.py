"""
Favorites routes
"""
from fastapi import APIRouter, Depends, status
from typing import Optional

from ...schemas import (
    FavoriteRequest, FavoriteResponse, FavoritesResponse,
    FavoriteStatusResponse, MessageResponse
)
from ...domain.models import FavoriteEntry, FavoriteType
from ...application.favorites import FavoritesStore
from ..dependencies import get_favorites_store


router = APIRouter(prefix="/api/v1/favorites", tags=["Favorites"])


def to_response(entry: FavoriteEntry) -> FavoriteResponse:
    return FavoriteResponse(
        id=entry.id,
        type=entry.type,
        title=entry.title,
        added_at=entry.added_at
    )


@router.get("", response_model=FavoritesResponse)
async def list_favorites(
    type: Optional[FavoriteType] = None,
    store: FavoritesStore = Depends(get_favorites_store)
):
    """
    List favorites in insertion order

    - **type**: Optional filter on article, service or content
    """
    entries = store.by_type(type) if type else store.entries
    return FavoritesResponse(
        favorites=[to_response(e) for e in entries],
        total=len(entries)
    )


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    item: FavoriteRequest,
    store: FavoritesStore = Depends(get_favorites_store)
):
    """Bookmark an item; bookmarking it twice keeps the first entry"""
    entry = await store.add(item.id, item.type, item.title)
    return to_response(entry)


@router.post("/toggle", response_model=FavoriteStatusResponse)
async def toggle_favorite(
    item: FavoriteRequest,
    store: FavoritesStore = Depends(get_favorites_store)
):
    """Add the item if absent, remove it if present"""
    is_favorite = await store.toggle(item.id, item.type, item.title)
    return FavoriteStatusResponse(id=item.id, type=item.type, is_favorite=is_favorite)


@router.get("/{item_type}/{item_id}", response_model=FavoriteStatusResponse)
async def favorite_status(
    item_type: FavoriteType,
    item_id: int,
    store: FavoritesStore = Depends(get_favorites_store)
):
    """Check whether an item is bookmarked"""
    return FavoriteStatusResponse(
        id=item_id,
        type=item_type,
        is_favorite=store.is_favorite(item_id, item_type)
    )


@router.delete("/{item_type}/{item_id}", response_model=MessageResponse)
async def remove_favorite(
    item_type: FavoriteType,
    item_id: int,
    store: FavoritesStore = Depends(get_favorites_store)
):
    """Remove a bookmark; removing one that is not there changes nothing"""
    if await store.remove(item_id, item_type):
        return MessageResponse(message="Favorite removed")
    return MessageResponse(message="Favorite was not in the list")


@router.delete("", response_model=MessageResponse)
async def clear_favorites(store: FavoritesStore = Depends(get_favorites_store)):
    """Remove every bookmark"""
    await store.clear()
    return MessageResponse(message="Favorites cleared")
