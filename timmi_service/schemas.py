"""
Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict, Any
from datetime import datetime

from .domain.models import ColorName, FavoriteType


class PageResponse(BaseModel):
    """Component name, props and url of a rendered page"""
    component: str
    props: Dict[str, Any]
    url: str


class MessageResponse(BaseModel):
    """Generic message response"""
    message: str


class ContactRequest(BaseModel):
    """Contact form submission"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=2000)
    user_type: str = Field("other", pattern=r"^(parent|teacher|other)$")


# Favorites
class FavoriteRequest(BaseModel):
    """Item to bookmark"""
    id: int
    type: FavoriteType
    title: str = Field(..., min_length=1, max_length=255)


class FavoriteResponse(BaseModel):
    """Bookmarked item"""
    id: int
    type: FavoriteType
    title: str
    added_at: datetime


class FavoritesResponse(BaseModel):
    """Favorites list response"""
    favorites: List[FavoriteResponse]
    total: int


class FavoriteStatusResponse(BaseModel):
    """Whether an item is bookmarked"""
    id: int
    type: FavoriteType
    is_favorite: bool


# Themes
class ThemeRequest(BaseModel):
    """Theme to apply"""
    name: str = Field("Personnalisé", min_length=1, max_length=100)
    primary: ColorName
    accent: ColorName
    is_dark: bool = False
    category: Optional[str] = None
    gradient: bool = False


class CustomThemeRequest(BaseModel):
    """Custom theme built from two colors"""
    primary: ColorName
    accent: ColorName
    name: str = Field("Personnalisé", min_length=1, max_length=100)
    is_dark: Optional[bool] = None


class ThemeResponse(BaseModel):
    """Theme selection"""
    name: str
    primary: ColorName
    accent: ColorName
    is_dark: bool
    category: Optional[str] = None
    gradient: bool = False


class ThemeStateResponse(BaseModel):
    """Theme with everything the front end needs to apply it"""
    theme: ThemeResponse
    tokens: Dict[str, str]
    css_variables: Dict[str, str]
    attributes: Dict[str, str]


class PresetsResponse(BaseModel):
    """Available presets and their display categories"""
    presets: Dict[str, ThemeResponse]
    categories: Dict[str, List[str]]
