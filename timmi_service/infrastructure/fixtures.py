"""
Teacher repository backed by a bundled JSON snapshot
"""
from datetime import datetime
from pathlib import Path
from typing import Optional, List, Dict, Any
import json
import logging

from ..domain.models import (
    Subject, TeacherProfile, TeacherRecord, coerce_hourly_rate, coerce_rating
)
from ..domain.repositories import ITeacherRepository

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE_PATH = Path(__file__).resolve().parent.parent / "data" / "teachers.json"


def _parse_subject(data: Dict[str, Any]) -> Subject:
    return Subject(
        id=int(data["id"]),
        name=data["name"],
        slug=data["slug"],
        category=data.get("category", ""),
    )


def _parse_profile(data: Optional[Dict[str, Any]]) -> Optional[TeacherProfile]:
    if data is None:
        return None

    created_at = data.get("created_at")
    return TeacherProfile(
        bio=data.get("bio"),
        hourly_rate=coerce_hourly_rate(data.get("hourly_rate")),
        rating=coerce_rating(data.get("rating")),
        total_reviews=data.get("total_reviews", 0),
        total_hours=data.get("total_hours", 0),
        is_verified=data.get("is_verified", False),
        created_at=datetime.fromisoformat(created_at) if created_at else None,
    )


def parse_teacher(data: Dict[str, Any], subjects_by_id: Dict[int, Subject]) -> TeacherRecord:
    """Build a TeacherRecord; absent profile or subjects stay None"""
    subject_ids = data.get("subjects")
    return TeacherRecord(
        id=int(data["id"]),
        name=data["name"],
        city=data.get("city", ""),
        avatar=data.get("avatar"),
        teacher_profile=_parse_profile(data.get("teacher_profile")),
        subjects=[subjects_by_id[i] for i in subject_ids if i in subjects_by_id]
        if subject_ids is not None else None,
    )


class FixtureTeacherRepository(ITeacherRepository):
    """Read-only repository over a JSON file of subjects and teachers"""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path) if path else DEFAULT_FIXTURE_PATH
        self._subjects: Optional[List[Subject]] = None
        self._teachers: Optional[List[TeacherRecord]] = None

    def _load(self):
        if self._teachers is not None:
            return

        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)

        self._subjects = [_parse_subject(s) for s in data.get("subjects", [])]
        subjects_by_id = {s.id: s for s in self._subjects}
        self._teachers = [parse_teacher(t, subjects_by_id) for t in data.get("teachers", [])]
        logger.info(
            f"Loaded {len(self._teachers)} teachers and {len(self._subjects)} subjects from {self.path}"
        )

    async def list_teachers(self) -> List[TeacherRecord]:
        self._load()
        return list(self._teachers)

    async def find_by_id(self, teacher_id: int) -> Optional[TeacherRecord]:
        self._load()
        for teacher in self._teachers:
            if teacher.id == teacher_id:
                return teacher
        return None

    async def list_subjects(self) -> List[Subject]:
        self._load()
        return list(self._subjects)
