"""
Theme routes
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ...schemas import (
    ThemeRequest, CustomThemeRequest, ThemeResponse,
    ThemeStateResponse, PresetsResponse
)
from ...domain.models import ColorName, ThemeConfig
from ...application.themes import (
    THEME_PRESETS, ThemeChangeDisabled, ThemeManager,
    create_custom_theme, css_variables, generate_theme_tokens,
    root_attributes, theme_categories, theme_to_dict
)
from ..dependencies import get_theme_manager


router = APIRouter(prefix="/api/v1/themes", tags=["Themes"])


def to_response(theme: ThemeConfig) -> ThemeResponse:
    return ThemeResponse(**theme_to_dict(theme))


def to_state(theme: ThemeConfig) -> ThemeStateResponse:
    return ThemeStateResponse(
        theme=to_response(theme),
        tokens=generate_theme_tokens(theme.primary, theme.accent, theme.is_dark),
        css_variables=css_variables(theme),
        attributes=root_attributes(theme)
    )


async def apply(change) -> ThemeStateResponse:
    """Run a theme change, translating a locked theme into 403"""
    try:
        theme = await change()
    except ThemeChangeDisabled as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )
    return to_state(theme)


@router.get("/current", response_model=ThemeStateResponse)
async def get_current_theme(manager: ThemeManager = Depends(get_theme_manager)):
    """Current theme with its tokens and CSS variables"""
    return to_state(await manager.current())


@router.put("/current", response_model=ThemeStateResponse)
async def change_theme(
    theme: ThemeRequest,
    manager: ThemeManager = Depends(get_theme_manager)
):
    """Replace the current theme"""
    config = ThemeConfig(**theme.model_dump())
    return await apply(lambda: manager.change(config))


@router.post("/random", response_model=ThemeStateResponse)
async def random_theme(manager: ThemeManager = Depends(get_theme_manager)):
    """Apply a random theme keeping the current dark mode"""
    return await apply(manager.randomize)


@router.post("/custom", response_model=ThemeStateResponse)
async def custom_theme(
    request: CustomThemeRequest,
    manager: ThemeManager = Depends(get_theme_manager)
):
    """Apply a theme built from two colors"""
    is_dark = request.is_dark
    if is_dark is None:
        is_dark = (await manager.current()).is_dark
    config = create_custom_theme(request.primary, request.accent, request.name, is_dark)
    return await apply(lambda: manager.change(config))


@router.post("/dark-mode", response_model=ThemeStateResponse)
async def toggle_dark_mode(manager: ThemeManager = Depends(get_theme_manager)):
    """Flip between light and dark mode"""
    return await apply(manager.toggle_dark_mode)


@router.post("/reset", response_model=ThemeStateResponse)
async def reset_theme(manager: ThemeManager = Depends(get_theme_manager)):
    """Back to the default preset"""
    return await apply(manager.reset)


@router.get("/recent", response_model=List[ThemeResponse])
async def recent_themes(manager: ThemeManager = Depends(get_theme_manager)):
    """Recently applied themes, most recent first"""
    return [to_response(t) for t in await manager.recent()]


@router.get("/presets", response_model=PresetsResponse)
async def list_presets():
    """Preset themes grouped by category"""
    return PresetsResponse(
        presets={key: to_response(preset) for key, preset in THEME_PRESETS.items()},
        categories=theme_categories()
    )


@router.get("/tokens")
async def theme_tokens(primary: ColorName, accent: ColorName, is_dark: bool = False):
    """Design tokens for an arbitrary color pair"""
    return generate_theme_tokens(primary, accent, is_dark)
