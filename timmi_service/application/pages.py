"""
Page props assembly

Each page route answers with the component name the front end renders and the
props it receives, the same envelope an Inertia response carries.
"""
from copy import deepcopy
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..domain.models import FavoriteType, FilterState, Subject, TeacherRecord, ThemeConfig
from .content import FAQ_CATEGORIES, PRICING_FAQ, PRICING_PLANS, SITE_STATS, STATIC_PAGES
from .favorites import FavoritesStore, entry_to_dict
from .teacher_search import available_cities, listing_stats, normalize_teacher, search_teachers
from .themes import (
    THEME_PRESETS, css_variables, generate_theme_tokens,
    root_attributes, theme_categories, theme_to_dict
)


class PageNotFound(Exception):
    """Raised for an unknown page or record"""
    pass


def render(component: str, props: Dict[str, Any], url: str) -> Dict[str, Any]:
    return {"component": component, "props": props, "url": url}


def search_faq(categories: List[dict], term: Optional[str]) -> List[dict]:
    """Keep questions whose question or answer contains term; drop emptied categories"""
    if not term:
        return deepcopy(categories)

    needle = term.lower()
    filtered = []
    for category in categories:
        questions = [
            q for q in category["questions"]
            if needle in q["question"].lower() or needle in q["answer"].lower()
        ]
        if questions:
            filtered.append({**category, "questions": questions})
    return filtered


def home_page() -> Dict[str, Any]:
    return render("home", {"stats": dict(SITE_STATS)}, "/")


def faq_page(term: Optional[str] = None) -> Dict[str, Any]:
    categories = search_faq(FAQ_CATEGORIES, term)
    return render(
        "faq",
        {
            "title": "Questions fréquentes",
            "categories": categories,
            "search": term or "",
            "total_questions": sum(len(c["questions"]) for c in categories),
        },
        "/faq",
    )


def pricing_page() -> Dict[str, Any]:
    return render(
        "pricing",
        {"title": "Nos tarifs", "plans": deepcopy(PRICING_PLANS), "faq": deepcopy(PRICING_FAQ)},
        "/pricing",
    )


def static_page(name: str) -> Dict[str, Any]:
    """Props of a page with no dynamic data"""
    if name == "home":
        return home_page()
    if name == "faq":
        return faq_page()
    if name == "pricing":
        return pricing_page()
    if name not in STATIC_PAGES:
        raise PageNotFound(f"Unknown page: {name}")
    return render(name, deepcopy(STATIC_PAGES[name]), f"/{name}")


def subject_props(subject: Subject) -> dict:
    return {"id": subject.id, "name": subject.name, "slug": subject.slug, "category": subject.category}


def teacher_props(record: TeacherRecord, now: Optional[datetime] = None) -> dict:
    """Serialize a normalized teacher with its derived fields"""
    profile = record.teacher_profile
    return {
        "id": record.id,
        "name": record.name,
        "city": record.city,
        "avatar": record.avatar,
        "teacher_profile": {
            "bio": profile.bio,
            "hourly_rate": profile.hourly_rate,
            "rating": profile.rating,
            "total_reviews": profile.total_reviews,
            "total_hours": profile.total_hours,
            "is_verified": profile.is_verified,
            "created_at": profile.created_at.isoformat() if profile.created_at else None,
        },
        "subjects": [subject_props(s) for s in record.subjects or []],
        "experience_years": record.experience_years(now),
    }


def teachers_page(
    teachers: List[TeacherRecord],
    subjects: List[Subject],
    filters: FilterState,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    results = search_teachers(teachers, filters, now)
    return render(
        "teachers",
        {
            "teachers": [teacher_props(t, now) for t in results],
            "total": len(results),
            "subjects": [subject_props(s) for s in subjects],
            "cities": available_cities(teachers),
            "stats": listing_stats(teachers, subjects),
            "filters": {
                "search": filters.search,
                "subject": filters.subject or "",
                "city": filters.city or "",
                "min_rate": filters.min_rate,
                "max_rate": filters.max_rate,
                "min_rating": filters.min_rating,
                "sort": filters.sort.value,
            },
        },
        "/teachers",
    )


def teacher_detail_page(record: Optional[TeacherRecord], now: Optional[datetime] = None) -> Dict[str, Any]:
    if record is None:
        raise PageNotFound("Teacher not found")
    return render(
        "teacher-detail",
        {"teacher": teacher_props(normalize_teacher(record), now)},
        f"/teachers/{record.id}",
    )


def favorites_page(store: FavoritesStore) -> Dict[str, Any]:
    groups = {t.value: [entry_to_dict(e) for e in store.by_type(t)] for t in FavoriteType}
    return render(
        "favorites",
        {
            "title": "Mes Favoris",
            "favorites": groups,
            "counts": {name: len(items) for name, items in groups.items()},
            "total": store.count,
        },
        "/favorites",
    )


def theme_demo_page(current: ThemeConfig, recent: List[ThemeConfig]) -> Dict[str, Any]:
    return render(
        "theme-demo",
        {
            "current_theme": theme_to_dict(current),
            "tokens": generate_theme_tokens(current.primary, current.accent, current.is_dark),
            "css_variables": css_variables(current),
            "attributes": root_attributes(current),
            "recent_themes": [theme_to_dict(t) for t in recent],
            "presets": {key: theme_to_dict(p) for key, p in THEME_PRESETS.items()},
            "categories": theme_categories(),
        },
        "/theme-demo",
    )
