"""
Theme engine - shade ramps, token generation and per-client theme state

A theme is two hue families (primary, accent) plus a light/dark flag. From those
the engine derives an 11-step shade ramp per token family and the CSS variables
the front end applies globally. Switching themes always replaces the whole token
set.
"""
from dataclasses import asdict, replace
from typing import Dict, List, Optional
import json
import logging
import random
import re

from ..domain.models import ColorName, ThemeConfig
from ..domain.repositories import IKeyValueStore
from .locks import key_lock

logger = logging.getLogger(__name__)

SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
TOKEN_FAMILIES = ("primary", "secondary", "accent")

LIGHTNESS = (0.98, 0.95, 0.9, 0.8, 0.65, 0.5, 0.4, 0.3, 0.22, 0.16, 0.1)
VIVID_CHROMA = (0.02, 0.04, 0.08, 0.12, 0.16, 0.2, 0.2, 0.18, 0.15, 0.12, 0.08)
SOFT_CHROMA = (0.015, 0.03, 0.06, 0.09, 0.12, 0.15, 0.18, 0.15, 0.12, 0.09, 0.06)
NEUTRAL_STEPS = (1, 2, 3, 4, 5, 6, 6, 5, 4, 3, 2)

# hue angle, chroma ramp
_HUE_FAMILIES = {
    ColorName.BLUE: (250, SOFT_CHROMA),
    ColorName.SKY: (220, SOFT_CHROMA),
    ColorName.PURPLE: (280, VIVID_CHROMA),
    ColorName.GREEN: (140, VIVID_CHROMA),
    ColorName.ORANGE: (60, VIVID_CHROMA),
    ColorName.PINK: (340, VIVID_CHROMA),
    ColorName.CYAN: (200, VIVID_CHROMA),
    ColorName.RED: (20, VIVID_CHROMA),
    ColorName.YELLOW: (90, VIVID_CHROMA),
    ColorName.INDIGO: (260, VIVID_CHROMA),
    ColorName.EMERALD: (160, VIVID_CHROMA),
    ColorName.ROSE: (350, VIVID_CHROMA),
    ColorName.TEAL: (180, VIVID_CHROMA),
    ColorName.AMBER: (75, VIVID_CHROMA),
    ColorName.VIOLET: (300, VIVID_CHROMA),
    ColorName.LIME: (120, VIVID_CHROMA),
    ColorName.FUCHSIA: (320, VIVID_CHROMA),
    ColorName.MINT: (150, VIVID_CHROMA),
}

# hue angle, chroma unit
_NEUTRAL_FAMILIES = {
    ColorName.SLATE: (240, 0.005),
    ColorName.GRAY: (240, 0.003),
    ColorName.ZINC: (220, 0.004),
    ColorName.STONE: (80, 0.004),
    ColorName.WHITE: (0, 0.003),
}

# Brand colors, tuned by hand: (lightness, chroma) per shade
_BRAND_FAMILIES = {
    ColorName.MAKITY_PURPLE: (285, (
        (0.98, 0.02), (0.95, 0.04), (0.9, 0.08), (0.8, 0.12), (0.65, 0.16), (0.35, 0.18),
        (0.3, 0.2), (0.25, 0.18), (0.2, 0.15), (0.15, 0.12), (0.1, 0.08),
    )),
    ColorName.MAKITY_YELLOW: (80, (
        (0.98, 0.02), (0.95, 0.04), (0.9, 0.08), (0.8, 0.12), (0.75, 0.16), (0.7, 0.18),
        (0.6, 0.16), (0.5, 0.14), (0.4, 0.12), (0.3, 0.1), (0.2, 0.08),
    )),
}

THEME_PRESETS: Dict[str, ThemeConfig] = {
    "default": ThemeConfig("Océan Profond", ColorName.BLUE, ColorName.CYAN, category="classic"),
    "classic_red": ThemeConfig("Feu Ardent", ColorName.RED, ColorName.ORANGE, category="classic"),
    "classic_green": ThemeConfig("Forêt Enchantée", ColorName.GREEN, ColorName.EMERALD, category="classic"),
    "royal_purple": ThemeConfig("Majesté Royale", ColorName.PURPLE, ColorName.VIOLET, category="premium"),
    "nature_forest": ThemeConfig("Forêt Mystique", ColorName.EMERALD, ColorName.LIME, category="nature", gradient=True),
    "ocean_breeze": ThemeConfig("Brise Océanique", ColorName.CYAN, ColorName.TEAL, category="nature"),
    "sunset_glow": ThemeConfig("Éclat du Couchant", ColorName.ORANGE, ColorName.AMBER, category="nature", gradient=True),
    "cherry_blossom": ThemeConfig("Fleur de Cerisier", ColorName.ROSE, ColorName.PINK, category="nature"),
    "mint_fresh": ThemeConfig("Fraîcheur Menthe", ColorName.MINT, ColorName.EMERALD, category="nature"),
    "spring_bloom": ThemeConfig("Floraison Printanière", ColorName.EMERALD, ColorName.ROSE, category="seasons", gradient=True),
    "summer_sky": ThemeConfig("Ciel d'Été", ColorName.SKY, ColorName.YELLOW, category="seasons"),
    "autumn_leaves": ThemeConfig("Feuilles d'Automne", ColorName.AMBER, ColorName.RED, category="seasons", gradient=True),
    "winter_frost": ThemeConfig("Givre Hivernal", ColorName.SLATE, ColorName.CYAN, category="seasons"),
    "galaxy_nebula": ThemeConfig("Nébuleuse Galactique", ColorName.PURPLE, ColorName.FUCHSIA, category="cosmic", gradient=True),
    "starlight": ThemeConfig("Lumière Stellaire", ColorName.INDIGO, ColorName.VIOLET, category="cosmic"),
    "aurora_borealis": ThemeConfig("Aurore Boréale", ColorName.TEAL, ColorName.VIOLET, category="cosmic", gradient=True),
    "cosmic_dust": ThemeConfig("Poussière Cosmique", ColorName.SLATE, ColorName.PURPLE, category="cosmic"),
    "neon_city": ThemeConfig("Ville Néon", ColorName.FUCHSIA, ColorName.CYAN, category="urban", gradient=True),
    "cyberpunk": ThemeConfig("Cyberpunk 2077", ColorName.VIOLET, ColorName.LIME, category="urban"),
    "midnight_blue": ThemeConfig("Bleu Minuit", ColorName.INDIGO, ColorName.SKY, category="urban"),
    "electric_pink": ThemeConfig("Rose Électrique", ColorName.PINK, ColorName.PURPLE, category="modern", gradient=True),
    "gold_luxury": ThemeConfig("Luxe Doré", ColorName.AMBER, ColorName.YELLOW, category="premium", gradient=True),
    "platinum_elite": ThemeConfig("Élite Platine", ColorName.SLATE, ColorName.ZINC, category="premium"),
    "emerald_prestige": ThemeConfig("Prestige Émeraude", ColorName.EMERALD, ColorName.TEAL, category="premium"),
    "ruby_excellence": ThemeConfig("Excellence Rubis", ColorName.RED, ColorName.ROSE, category="premium", gradient=True),
    "makity_theme": ThemeConfig("7MAKITY", ColorName.MAKITY_PURPLE, ColorName.MAKITY_YELLOW, category="premium", gradient=True),
    "makity_white": ThemeConfig("7MAKITY Blanc", ColorName.WHITE, ColorName.MAKITY_PURPLE, category="premium", gradient=True),
    "makity_yellow": ThemeConfig("7MAKITY Jaune Moutarde", ColorName.MAKITY_YELLOW, ColorName.MAKITY_PURPLE, category="premium", gradient=True),
}

CATEGORY_LABELS = {
    "classic": "Classiques",
    "nature": "Nature",
    "seasons": "Saisons",
    "cosmic": "Cosmique",
    "urban": "Urbain",
    "premium": "Premium",
    "modern": "Moderne",
}

RANDOM_THEME_NAME = "Thème Aléatoire"

_OKLCH_PATTERN = re.compile(r"oklch\(([\d.]+)\s+([\d.]+)\s+([\d.]+)\)")


class ThemeChangeDisabled(Exception):
    """Raised when theme changes are locked by configuration"""
    pass


def _oklch(lightness: float, chroma: float, hue: float) -> str:
    return f"oklch({round(lightness, 3):g} {round(chroma, 3):g} {hue:g})"


def palette(color: ColorName) -> Dict[str, str]:
    """11-step shade ramp of OKLCH colors for a hue family"""
    color = ColorName(color)
    if color in _BRAND_FAMILIES:
        hue, steps = _BRAND_FAMILIES[color]
        return {shade: _oklch(l, c, hue) for shade, (l, c) in zip(SHADES, steps)}
    if color in _NEUTRAL_FAMILIES:
        hue, unit = _NEUTRAL_FAMILIES[color]
        return {
            shade: _oklch(l, unit * n, hue)
            for shade, l, n in zip(SHADES, LIGHTNESS, NEUTRAL_STEPS)
        }
    hue, chroma = _HUE_FAMILIES[color]
    return {shade: _oklch(l, c, hue) for shade, l, c in zip(SHADES, LIGHTNESS, chroma)}


def oklch_to_rgb(value: str) -> str:
    """
    Approximate an OKLCH color as an "r, g, b" triple

    The conversion interpolates by 60 degree hue sectors; it is tuned for the
    palette ramps above, not for colorimetric accuracy.
    """
    match = _OKLCH_PATTERN.match(value.strip())
    if not match:
        return "0, 0, 0"

    lightness, chroma, hue = (float(part) for part in match.groups())
    hue = hue % 360

    if hue < 60:
        r, g, b = lightness + chroma * 0.9, lightness + chroma * 0.5 * (hue / 60), lightness - chroma * 0.3
    elif hue < 120:
        r, g, b = lightness + chroma * 0.9 * (1 - (hue - 60) / 60), lightness + chroma * 0.5, lightness - chroma * 0.3
    elif hue < 180:
        r, g, b = lightness - chroma * 0.4, lightness + chroma * 0.5, lightness + chroma * 0.5 * ((hue - 120) / 60)
    elif hue < 240:
        r, g, b = lightness - chroma * 0.4, lightness + chroma * 0.5 * (1 - (hue - 180) / 60), lightness + chroma * 0.9
    elif hue < 300:
        r, g, b = lightness + chroma * 0.5 * ((hue - 240) / 60), lightness - chroma * 0.3, lightness + chroma * 0.9
    else:
        r, g, b = lightness + chroma * 0.9, lightness - chroma * 0.3, lightness + chroma * 0.9 * (1 - (hue - 300) / 60)

    channels = [max(0, min(255, round(channel * 255))) for channel in (r, g, b)]
    return ", ".join(str(channel) for channel in channels)


def generate_theme_tokens(primary: ColorName, accent: ColorName, is_dark: bool = False) -> Dict[str, str]:
    """
    Build the full token map for a hue pair

    Returns:
        Mapping such as {"primary-500": "oklch(0.5 0.15 250)", ...} with 11 shades
        for each of the primary, secondary and accent families
    """
    families = {
        "primary": palette(primary),
        "secondary": palette(accent),
        "accent": palette(accent),
    }
    return {
        f"{family}-{shade}": value
        for family in TOKEN_FAMILIES
        for shade, value in families[family].items()
    }


def css_variables(theme: ThemeConfig) -> Dict[str, str]:
    """CSS custom properties and root attributes applied for a theme"""
    variables: Dict[str, str] = {}
    for token, value in generate_theme_tokens(theme.primary, theme.accent, theme.is_dark).items():
        family, shade = token.rsplit("-", 1)
        rgb = oklch_to_rgb(value)
        variables[f"--{family}-rgb-{shade}"] = rgb
        variables[f"--{family}-{shade}"] = f"rgb({rgb})"
    return variables


def root_attributes(theme: ThemeConfig) -> Dict[str, str]:
    primary = ColorName(theme.primary).value
    accent = ColorName(theme.accent).value
    return {
        "data-theme": f"{primary}-{accent}",
        "data-theme-mode": "dark" if theme.is_dark else "light",
        "class": "dark" if theme.is_dark else "",
    }


def create_custom_theme(
    primary: ColorName, accent: ColorName, name: str = "Personnalisé", is_dark: bool = False
) -> ThemeConfig:
    """Build a theme from explicit colors"""
    return ThemeConfig(
        name=name,
        primary=ColorName(primary),
        accent=ColorName(accent),
        is_dark=is_dark,
    )


def generate_random_theme(is_dark: bool = False, rng: Optional[random.Random] = None) -> ThemeConfig:
    """Pick a random primary/accent pair; the two colors always differ"""
    rng = rng or random.Random()
    colors = list(ColorName)
    primary = rng.choice(colors)
    accent = rng.choice([color for color in colors if color != primary])
    return ThemeConfig(name=RANDOM_THEME_NAME, primary=primary, accent=accent, is_dark=is_dark)


def theme_categories() -> Dict[str, List[str]]:
    """Preset keys grouped under their display category"""
    categories: Dict[str, List[str]] = {label: [] for label in CATEGORY_LABELS.values()}
    for key, preset in THEME_PRESETS.items():
        label = CATEGORY_LABELS.get(preset.category or "")
        if label:
            categories[label].append(key)
    return categories


def theme_to_dict(theme: ThemeConfig) -> dict:
    data = asdict(theme)
    data["primary"] = ColorName(theme.primary).value
    data["accent"] = ColorName(theme.accent).value
    return data


def theme_from_dict(data: dict) -> ThemeConfig:
    return ThemeConfig(
        name=str(data["name"]),
        primary=ColorName(data["primary"]),
        accent=ColorName(data["accent"]),
        is_dark=bool(data.get("is_dark", False)),
        category=data.get("category"),
        gradient=bool(data.get("gradient", False)),
    )


class ThemeManager:
    """Current theme and recent-themes history of one client"""

    def __init__(
        self,
        storage: IKeyValueStore,
        client_id: str,
        default_key: str = "default",
        allow_change: bool = True,
        default_dark: bool = False,
        recent_limit: int = 5,
        key_prefix: str = "",
    ):
        self.storage = storage
        self.client_id = client_id
        self.allow_change = allow_change
        self.recent_limit = recent_limit
        base = THEME_PRESETS.get(default_key) or THEME_PRESETS["default"]
        self.default_theme = replace(base, is_dark=default_dark)
        prefix = f"{key_prefix}:" if key_prefix else ""
        self.theme_key = f"{prefix}theme:{client_id}"
        self.recent_key = f"{prefix}recent_themes:{client_id}"

    async def current(self) -> ThemeConfig:
        """Saved theme, or the configured default"""
        if not self.allow_change:
            return self.default_theme

        raw = await self.storage.get(self.theme_key)
        if not raw:
            return self.default_theme

        try:
            return theme_from_dict(json.loads(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring corrupt saved theme for client {self.client_id}: {e}")
            return self.default_theme

    async def recent(self) -> List[ThemeConfig]:
        raw = await self.storage.get(self.recent_key)
        if not raw:
            return []

        try:
            return [theme_from_dict(item) for item in json.loads(raw)]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring corrupt recent themes for client {self.client_id}: {e}")
            return []

    async def _apply(self, theme: ThemeConfig) -> ThemeConfig:
        # Caller holds key_lock(self.theme_key)
        if not self.allow_change:
            logger.warning("Theme change attempted while changes are disabled")
            raise ThemeChangeDisabled("Theme changes are disabled")

        await self.storage.set(self.theme_key, json.dumps(theme_to_dict(theme), ensure_ascii=False))

        recent = [
            t for t in await self.recent()
            if (t.primary, t.accent) != (theme.primary, theme.accent)
        ]
        recent = [theme] + recent
        await self.storage.set(
            self.recent_key,
            json.dumps([theme_to_dict(t) for t in recent[: self.recent_limit]], ensure_ascii=False),
        )
        return theme

    async def change(self, theme: ThemeConfig) -> ThemeConfig:
        """
        Replace the current theme

        Raises:
            ThemeChangeDisabled: If theme changes are locked
        """
        async with key_lock(self.theme_key):
            return await self._apply(theme)

    async def toggle_dark_mode(self) -> ThemeConfig:
        async with key_lock(self.theme_key):
            current = await self.current()
            return await self._apply(replace(current, is_dark=not current.is_dark))

    async def reset(self) -> ThemeConfig:
        async with key_lock(self.theme_key):
            current = await self.current()
            return await self._apply(replace(THEME_PRESETS["default"], is_dark=current.is_dark))

    async def randomize(self, rng: Optional[random.Random] = None) -> ThemeConfig:
        async with key_lock(self.theme_key):
            current = await self.current()
            return await self._apply(generate_random_theme(current.is_dark, rng))

    async def tokens(self) -> Dict[str, str]:
        theme = await self.current()
        return generate_theme_tokens(theme.primary, theme.accent, theme.is_dark)
