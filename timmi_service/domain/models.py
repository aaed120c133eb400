"""
Domain models - Core business entities
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, List
import math

DEFAULT_HOURLY_RATE = 5000
DEFAULT_RATING = 4.0
MAX_RATING = 5.0


class SortKey(str, Enum):
    """Sort orders offered by the teacher listing"""
    RATING = "rating"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    EXPERIENCE = "experience"
    REVIEWS = "reviews"


class FavoriteType(str, Enum):
    """Kinds of content a visitor can bookmark"""
    ARTICLE = "article"
    SERVICE = "service"
    CONTENT = "content"


class ColorName(str, Enum):
    """Named hue families available to themes"""
    BLUE = "blue"
    PURPLE = "purple"
    GREEN = "green"
    ORANGE = "orange"
    PINK = "pink"
    CYAN = "cyan"
    RED = "red"
    YELLOW = "yellow"
    INDIGO = "indigo"
    EMERALD = "emerald"
    ROSE = "rose"
    TEAL = "teal"
    AMBER = "amber"
    VIOLET = "violet"
    LIME = "lime"
    SLATE = "slate"
    GRAY = "gray"
    ZINC = "zinc"
    STONE = "stone"
    SKY = "sky"
    FUCHSIA = "fuchsia"
    MINT = "mint"
    WHITE = "white"
    MAKITY_PURPLE = "makity_purple"
    MAKITY_YELLOW = "makity_yellow"


@dataclass
class Subject:
    """Subject domain model"""
    id: int
    name: str
    slug: str
    category: str = ""


@dataclass
class TeacherProfile:
    """Public teaching profile attached to a teacher"""
    bio: str
    hourly_rate: int
    rating: float
    total_reviews: int = 0
    total_hours: int = 0
    is_verified: bool = False
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if self.hourly_rate < 0:
            raise ValueError(f"hourly_rate must be >= 0, got {self.hourly_rate}")
        if not 0 <= self.rating <= MAX_RATING:
            raise ValueError(f"rating must be between 0 and 5, got {self.rating}")


@dataclass
class TeacherRecord:
    """Teacher as shown to browsing parents"""
    id: int
    name: str
    city: str
    avatar: Optional[str] = None
    teacher_profile: Optional[TeacherProfile] = None
    subjects: Optional[List[Subject]] = None

    def is_complete(self) -> bool:
        """Check whether the nested profile and subjects were provided"""
        return self.teacher_profile is not None and self.subjects is not None

    def experience_years(self, now: Optional[datetime] = None) -> int:
        """Whole years since the profile was created, 0 when unknown"""
        if not self.teacher_profile or not self.teacher_profile.created_at:
            return 0
        created = self.teacher_profile.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        reference = now or datetime.now(timezone.utc)
        if reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)
        return max(0, (reference - created).days // 365)


@dataclass
class FilterState:
    """Active search and sort criteria on the teacher listing"""
    search: str = ""
    subject: Optional[str] = None
    city: Optional[str] = None
    min_rate: int = 0
    max_rate: int = 20000
    min_rating: float = 0.0
    sort: SortKey = SortKey.RATING


@dataclass
class FavoriteEntry:
    """Bookmark of a content item"""
    id: int
    type: FavoriteType
    title: str
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def key(self) -> tuple:
        return (self.id, self.type)


@dataclass
class ThemeConfig:
    """Theme selection: two hue families and a light/dark mode"""
    name: str
    primary: ColorName
    accent: ColorName
    is_dark: bool = False
    category: Optional[str] = None
    gradient: bool = False


def coerce_hourly_rate(value: Any) -> int:
    """Stored rate as whole currency units; missing or unreadable values get the default"""
    try:
        rate = round(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_HOURLY_RATE
    return max(0, rate)


def coerce_rating(value: Any) -> float:
    """Stored rating clamped to 0..5; missing or unreadable values get the default"""
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return DEFAULT_RATING
    if math.isnan(rating):
        return DEFAULT_RATING
    return min(MAX_RATING, max(0.0, rating))
