"""
Test doubles and constants shared across test modules.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import uuid4

from schoolbase.core.auth import Principal
from schoolbase.core.roles import UserRole
from schoolbase.modules.students.models import Student
from schoolbase.modules.students.repository import IMMUTABLE_FIELDS

SCHOOL_1 = "11111111-1111-4111-8111-111111111111"
SCHOOL_2 = "22222222-2222-4222-8222-222222222222"


def make_principal(role: UserRole | None, school_id: str | None = None) -> Principal:
    return Principal(id=str(uuid4()), role=role, school_id=school_id, email="user@test.com")


class FakeStudentRepository:
    """In-memory stand-in for StudentRepository with the same tenant filtering."""

    def __init__(self):
        self.rows: dict[str, Student] = {}

    def add(self, school_id: str, **fields) -> Student:
        now = datetime.now(UTC)
        student_id = fields.pop("id", str(uuid4()))
        student = Student(
            id=student_id,
            school_id=school_id,
            created_at=now,
            updated_at=now,
            **fields,
        )
        self.rows[student.id] = student
        return student

    async def create(self, _db, school_id, data):
        values = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}
        return self.add(school_id, **values)

    async def list_by_school(self, _db, school_id):
        return [s for s in self.rows.values() if s.school_id == school_id]

    async def get(self, _db, student_id, school_id):
        student = self.rows.get(student_id)
        if student is None or student.school_id != school_id:
            return None
        return student

    async def update(self, db, student_id, school_id, data):
        student = await self.get(db, student_id, school_id)
        if student is None:
            return None
        for key, value in data.items():
            if key not in IMMUTABLE_FIELDS:
                setattr(student, key, value)
        return student

    async def delete(self, db, student_id, school_id):
        if await self.get(db, student_id, school_id) is None:
            return False
        del self.rows[student_id]
        return True


class FakeObjectStore:
    def __init__(self, public_url: str = "https://storage.test/public/file.png"):
        self.public_url = public_url
        self.create_signed_upload_url = AsyncMock(side_effect=self._sign)

    async def _sign(self, path: str) -> str:
        return f"https://storage.test/upload/{path}?token=signed"

    async def get_public_url(self, path: str) -> str:
        return self.public_url
