"""
Repository implementations - Data access layer
"""
from collections import defaultdict
from typing import Optional, List, Dict, Any

from ...domain.models import (
    Subject, TeacherProfile, TeacherRecord, coerce_hourly_rate, coerce_rating
)
from ...domain.repositories import ITeacherRepository
from .connection import Database

TEACHER_COLUMNS = """
    u.id, u.name, u.city, u.avatar,
    tp.user_id AS profile_user_id, tp.bio, tp.hourly_rate, tp.rating,
    tp.total_reviews, tp.total_hours, tp.is_verified, tp.created_at
"""


def row_to_subject(row: Dict[str, Any]) -> Subject:
    return Subject(
        id=row["id"],
        name=row["name"],
        slug=row["slug"],
        category=row.get("category") or "",
    )


def row_to_teacher(row: Dict[str, Any], subjects: Optional[List[Subject]] = None) -> TeacherRecord:
    """Convert a users LEFT JOIN teacher_profiles row to a TeacherRecord"""
    profile = None
    if row.get("profile_user_id") is not None:
        profile = TeacherProfile(
            bio=row.get("bio"),
            hourly_rate=coerce_hourly_rate(row.get("hourly_rate")),
            rating=coerce_rating(row.get("rating")),
            total_reviews=row.get("total_reviews") or 0,
            total_hours=row.get("total_hours") or 0,
            is_verified=bool(row.get("is_verified")),
            created_at=row.get("created_at"),
        )

    return TeacherRecord(
        id=row["id"],
        name=row["name"],
        city=row.get("city") or "",
        avatar=row.get("avatar"),
        teacher_profile=profile,
        subjects=subjects,
    )


class PostgresTeacherRepository(ITeacherRepository):
    """Teacher repository implementation using PostgreSQL"""

    def __init__(self, db: Database):
        self.db = db

    async def _subjects_by_teacher(self, teacher_ids: List[int]) -> Dict[int, List[Subject]]:
        if not teacher_ids:
            return {}

        rows = await self.db.fetch_all(
            """
            SELECT ts.user_id, s.id, s.name, s.slug, s.category
            FROM teacher_subjects ts
            INNER JOIN subjects s ON s.id = ts.subject_id
            WHERE ts.user_id = ANY($1::bigint[])
            ORDER BY s."order", s.name
            """,
            teacher_ids
        )
        grouped: Dict[int, List[Subject]] = defaultdict(list)
        for row in rows:
            grouped[row["user_id"]].append(row_to_subject(row))
        return grouped

    async def list_teachers(self) -> List[TeacherRecord]:
        """List active teachers with their profile and subjects"""
        rows = await self.db.fetch_all(
            f"""
            SELECT {TEACHER_COLUMNS}
            FROM users u
            LEFT JOIN teacher_profiles tp ON tp.user_id = u.id
            WHERE u.role = 'teacher' AND u.is_active = true
            ORDER BY u.id
            """
        )
        subjects = await self._subjects_by_teacher([row["id"] for row in rows])
        return [row_to_teacher(row, subjects.get(row["id"])) for row in rows]

    async def find_by_id(self, teacher_id: int) -> Optional[TeacherRecord]:
        """Find teacher by ID"""
        row = await self.db.fetch_one(
            f"""
            SELECT {TEACHER_COLUMNS}
            FROM users u
            LEFT JOIN teacher_profiles tp ON tp.user_id = u.id
            WHERE u.id = $1 AND u.role = 'teacher' AND u.is_active = true
            """,
            teacher_id
        )
        if not row:
            return None

        subjects = await self._subjects_by_teacher([teacher_id])
        return row_to_teacher(row, subjects.get(teacher_id))

    async def list_subjects(self) -> List[Subject]:
        """List active subjects in display order"""
        rows = await self.db.fetch_all(
            """
            SELECT id, name, slug, category
            FROM subjects
            WHERE is_active = true
            ORDER BY "order", name
            """
        )
        return [row_to_subject(row) for row in rows]
