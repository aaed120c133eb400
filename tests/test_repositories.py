import unittest
from datetime import datetime, timezone
from decimal import Decimal

from timmi_service.domain.models import (
    DEFAULT_HOURLY_RATE, DEFAULT_RATING, FilterState, Subject,
    coerce_hourly_rate, coerce_rating
)
from timmi_service.application.teacher_search import search_teachers
from timmi_service.infrastructure.database.connection import Database, DatabaseNotConnected
from timmi_service.infrastructure.database.repositories import (
    PostgresTeacherRepository, row_to_teacher
)
from timmi_service.infrastructure.fixtures import parse_teacher

MATHS = Subject(id=1, name="Mathématiques", slug="mathematiques")


def make_row(**overrides):
    row = {
        "id": 10,
        "name": "Aïssatou Bah",
        "city": "Conakry",
        "avatar": None,
        "profile_user_id": 10,
        "bio": "Cours de chimie",
        "hourly_rate": 6000,
        "rating": 4.5,
        "total_reviews": 12,
        "total_hours": 80,
        "is_verified": True,
        "created_at": datetime(2021, 1, 1, tzinfo=timezone.utc),
    }
    row.update(overrides)
    return row


class TestCoercion(unittest.TestCase):
    """Tests for lenient reading of stored rates and ratings."""

    def test_missing_rate(self):
        self.assertEqual(coerce_hourly_rate(None), DEFAULT_HOURLY_RATE)

    def test_decimal_rate_is_int(self):
        rate = coerce_hourly_rate(Decimal("4500.00"))
        self.assertEqual(rate, 4500)
        self.assertIsInstance(rate, int)

    def test_negative_rate(self):
        self.assertEqual(coerce_hourly_rate(-100), 0)

    def test_unreadable_rate(self):
        self.assertEqual(coerce_hourly_rate("abc"), DEFAULT_HOURLY_RATE)
        self.assertEqual(coerce_hourly_rate(float("inf")), DEFAULT_HOURLY_RATE)

    def test_missing_rating(self):
        self.assertEqual(coerce_rating(None), DEFAULT_RATING)
        self.assertEqual(coerce_rating(float("nan")), DEFAULT_RATING)

    def test_rating_is_clamped(self):
        self.assertEqual(coerce_rating(5.5), 5.0)
        self.assertEqual(coerce_rating(-1), 0.0)
        self.assertEqual(coerce_rating(Decimal("3.7")), 3.7)


class TestRowToTeacher(unittest.TestCase):
    """Tests for mapping joined database rows."""

    def test_complete_row(self):
        teacher = row_to_teacher(make_row(), [MATHS])

        self.assertEqual(teacher.teacher_profile.hourly_rate, 6000)
        self.assertEqual(teacher.teacher_profile.rating, 4.5)
        self.assertEqual(teacher.subjects, [MATHS])

    def test_null_rate_gets_default(self):
        """Should fall back to the default rate, as an int, when the column is NULL."""
        profile = row_to_teacher(make_row(hourly_rate=None)).teacher_profile

        self.assertEqual(profile.hourly_rate, DEFAULT_HOURLY_RATE)
        self.assertIsInstance(profile.hourly_rate, int)

    def test_null_rating_gets_default(self):
        profile = row_to_teacher(make_row(rating=None)).teacher_profile
        self.assertEqual(profile.rating, DEFAULT_RATING)

    def test_numeric_columns(self):
        """Should convert NUMERIC values returned by the driver."""
        profile = row_to_teacher(make_row(hourly_rate=Decimal("4500.00"), rating=Decimal("4.20"))).teacher_profile

        self.assertEqual(profile.hourly_rate, 4500)
        self.assertAlmostEqual(profile.rating, 4.2)

    def test_out_of_range_rating_does_not_break_listing(self):
        """Should clamp a rating above 5 instead of failing the whole listing."""
        teachers = [
            row_to_teacher(make_row(rating=5.5), [MATHS]),
            row_to_teacher(make_row(id=11, name="Mamadou Sow", rating=4.0), [MATHS]),
        ]

        results = search_teachers(teachers, FilterState())

        self.assertEqual([t.id for t in results], [10, 11])
        self.assertEqual(results[0].teacher_profile.rating, 5.0)

    def test_negative_rate(self):
        profile = row_to_teacher(make_row(hourly_rate=-50)).teacher_profile
        self.assertEqual(profile.hourly_rate, 0)

    def test_without_profile(self):
        """Should leave the profile unset when the LEFT JOIN found nothing."""
        teacher = row_to_teacher(make_row(profile_user_id=None, hourly_rate=None, rating=None))

        self.assertIsNone(teacher.teacher_profile)
        self.assertIsNone(teacher.subjects)

    def test_null_city(self):
        self.assertEqual(row_to_teacher(make_row(city=None)).city, "")


class FakeDatabase:
    """Answers teacher and subject queries from canned rows"""

    def __init__(self, teacher_rows, subject_rows):
        self.teacher_rows = teacher_rows
        self.subject_rows = subject_rows

    async def fetch_all(self, query, *args):
        if "teacher_subjects" in query:
            return self.subject_rows
        return self.teacher_rows

    async def fetch_one(self, query, *args):
        return next((r for r in self.teacher_rows if r["id"] == args[0]), None)


class TestPostgresTeacherRepository(unittest.IsolatedAsyncioTestCase):
    """Tests for PostgresTeacherRepository over canned rows."""

    async def asyncSetUp(self):
        subject_row = {"user_id": 10, "id": 1, "name": "Mathématiques", "slug": "mathematiques", "category": None}
        self.repository = PostgresTeacherRepository(FakeDatabase(
            [make_row(hourly_rate=None, rating=5.5), make_row(id=11, name="Mamadou Sow", profile_user_id=None)],
            [subject_row],
        ))

    async def test_listing_survives_bad_values(self):
        """Should list every teacher even with NULL or out-of-range profile values."""
        teachers = await self.repository.list_teachers()

        self.assertEqual([t.id for t in teachers], [10, 11])
        self.assertEqual(teachers[0].teacher_profile.hourly_rate, DEFAULT_HOURLY_RATE)
        self.assertEqual(teachers[0].teacher_profile.rating, 5.0)
        self.assertEqual([s.slug for s in teachers[0].subjects], ["mathematiques"])
        self.assertIsNone(teachers[1].teacher_profile)

    async def test_find_by_id(self):
        teacher = await self.repository.find_by_id(10)
        self.assertEqual(teacher.name, "Aïssatou Bah")
        self.assertIsNone(await self.repository.find_by_id(99))


class TestDatabase(unittest.IsolatedAsyncioTestCase):
    """Tests for the connection wrapper without a server."""

    async def test_query_before_connect(self):
        with self.assertRaises(DatabaseNotConnected):
            await Database(url="postgresql://unused").fetch_all("SELECT 1")

    async def test_disconnect_without_pool(self):
        database = Database(url="postgresql://unused")
        await database.disconnect()
        self.assertIsNone(database.pool)


class TestParseTeacher(unittest.TestCase):
    """Tests for reading teachers from the JSON snapshot."""

    def test_profile_values_are_coerced(self):
        data = {
            "id": 3,
            "name": "Fatou Camara",
            "city": "Labé",
            "teacher_profile": {"bio": "Anglais", "hourly_rate": None, "rating": 7},
            "subjects": [1, 99],
        }
        teacher = parse_teacher(data, {1: MATHS})

        self.assertEqual(teacher.teacher_profile.hourly_rate, DEFAULT_HOURLY_RATE)
        self.assertEqual(teacher.teacher_profile.rating, 5.0)
        self.assertEqual(teacher.subjects, [MATHS])


if __name__ == "__main__":
    unittest.main()
