"""
Page routes
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
import logging

from ...schemas import PageResponse, ContactRequest, MessageResponse
from ...application import pages
from ...application.favorites import FavoritesStore
from ...application.themes import ThemeManager
from ..dependencies import get_favorites_store, get_theme_manager

logger = logging.getLogger(__name__)

CONTACT_SUCCESS = (
    "Votre message a été envoyé avec succès. "
    "Nous vous répondrons dans les plus brefs délais."
)

router = APIRouter(prefix="/api/v1/pages", tags=["Pages"])


@router.get("/faq", response_model=PageResponse)
async def faq_page(q: Optional[str] = Query(None, max_length=200)):
    """
    FAQ page

    - **q**: Optional search over question and answer text
    """
    return pages.faq_page(q)


@router.get("/favorites", response_model=PageResponse)
async def favorites_page(store: FavoritesStore = Depends(get_favorites_store)):
    """Favorites grouped by type"""
    return pages.favorites_page(store)


@router.get("/theme-demo", response_model=PageResponse)
async def theme_demo_page(manager: ThemeManager = Depends(get_theme_manager)):
    """Theme showcase with the client's current theme"""
    return pages.theme_demo_page(await manager.current(), await manager.recent())


@router.post("/contact", response_model=MessageResponse)
async def contact_submit(form: ContactRequest):
    """Accept a contact form submission"""
    logger.info(f"Contact message received from {form.user_type} about: {form.subject}")
    return MessageResponse(message=CONTACT_SUCCESS)


@router.get("/{page}", response_model=PageResponse)
async def static_page(page: str):
    """Home, about, contact, pricing, blog, privacy, terms and notifications pages"""
    try:
        return pages.static_page(page)
    except pages.PageNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
