"""
Teacher listing search - filtering and sorting of teacher records

The listing page receives the whole teacher snapshot and recomputes the visible
sequence on every filter change. Everything here is a pure function of
(records, filters); incomplete records are resolved to defaults instead of being
dropped.
"""
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from ..domain.models import (
    DEFAULT_HOURLY_RATE, DEFAULT_RATING, FilterState, SortKey, Subject, TeacherProfile, TeacherRecord
)

DEFAULT_BIO = "Profil en cours de complétion"


def default_profile() -> TeacherProfile:
    """Profile substituted for teachers who have not completed theirs"""
    return TeacherProfile(
        bio=DEFAULT_BIO,
        hourly_rate=DEFAULT_HOURLY_RATE,
        rating=DEFAULT_RATING,
        total_reviews=0,
        total_hours=0,
        is_verified=False,
        created_at=None,
    )


def normalize_teacher(record: TeacherRecord) -> TeacherRecord:
    """Return a copy of record with missing profile/subjects replaced by defaults"""
    if record.is_complete():
        return record
    return replace(
        record,
        teacher_profile=record.teacher_profile or default_profile(),
        subjects=list(record.subjects) if record.subjects is not None else [],
    )


def matches(record: TeacherRecord, filters: FilterState) -> bool:
    """Check a normalized record against every active filter"""
    profile = record.teacher_profile
    subjects = record.subjects or []

    term = filters.search.lower() if filters.search else ""
    matches_search = (
        not term
        or term in record.name.lower()
        or (bool(profile.bio) and term in profile.bio.lower())
    )
    matches_subject = not filters.subject or any(s.slug == filters.subject for s in subjects)
    matches_city = not filters.city or record.city == filters.city
    matches_price = filters.min_rate <= profile.hourly_rate <= filters.max_rate
    matches_rating = profile.rating >= filters.min_rating

    return matches_search and matches_subject and matches_city and matches_price and matches_rating


def _sort_value(key: SortKey, now: datetime) -> Callable[[TeacherRecord], float]:
    # Descending orders negate the value so every key sorts ascending.
    if key == SortKey.PRICE_ASC:
        return lambda t: t.teacher_profile.hourly_rate
    if key == SortKey.PRICE_DESC:
        return lambda t: -t.teacher_profile.hourly_rate
    if key == SortKey.EXPERIENCE:
        return lambda t: -t.experience_years(now)
    if key == SortKey.REVIEWS:
        return lambda t: -t.teacher_profile.total_reviews
    return lambda t: -t.teacher_profile.rating


def sort_teachers(
    records: Iterable[TeacherRecord],
    key: SortKey = SortKey.RATING,
    now: Optional[datetime] = None,
) -> List[TeacherRecord]:
    """
    Sort normalized records by the selected key

    Ties on the selected key are broken by teacher id ascending.
    """
    reference = now or datetime.now(timezone.utc)
    value = _sort_value(SortKey(key), reference)
    return sorted(records, key=lambda t: (value(t), t.id))


def search_teachers(
    records: Iterable[TeacherRecord],
    filters: Optional[FilterState] = None,
    now: Optional[datetime] = None,
) -> List[TeacherRecord]:
    """Normalize, filter and sort a teacher snapshot"""
    filters = filters or FilterState()
    normalized = [normalize_teacher(record) for record in records]
    kept = [record for record in normalized if matches(record, filters)]
    return sort_teachers(kept, filters.sort, now)


def available_cities(records: Iterable[TeacherRecord]) -> List[str]:
    """Distinct city names, sorted, for the city filter"""
    return sorted({record.city for record in records if record.city})


def listing_stats(records: List[TeacherRecord], subjects: List[Subject]) -> Dict[str, int]:
    """Quick stats strip shown above the listing"""
    return {
        "verified_teachers": sum(
            1 for r in records if r.teacher_profile is not None and r.teacher_profile.is_verified
        ),
        "subjects": len(subjects),
        "teachers": len(records),
    }
