"""
Student Repository

Database operations for students and guardians.

Every query is filtered by school_id. Callers pass the school id resolved
by the tenant gate, never one taken from a request payload.
"""

import logging
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.modules.students.models import Guardian, Student

logger = logging.getLogger(__name__)

# Columns never written from an update payload
IMMUTABLE_FIELDS = frozenset({"id", "school_id", "student_id", "created_at", "updated_at"})


def _mutable(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}


class StudentRepository:
    """Repository for student database operations."""

    @staticmethod
    async def create(db: AsyncSession, school_id: str, data: dict[str, Any]) -> Student:
        """
        Create a student in ``school_id``.

        A school_id inside ``data`` is ignored.
        """
        student = Student(**_mutable(data), school_id=school_id)

        db.add(student)
        await db.flush()
        await db.refresh(student)

        logger.info(f"Created student {student.id} in school {school_id}")
        return student

    @staticmethod
    async def list_by_school(db: AsyncSession, school_id: str) -> list[Student]:
        result = await db.execute(
            select(Student)
            .where(Student.school_id == school_id)
            .order_by(Student.last_name, Student.first_name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get(db: AsyncSession, student_id: str, school_id: str) -> Student | None:
        """
        Get a student by id within a school.

        Returns:
            Student or None if absent or owned by another school
        """
        result = await db.execute(
            select(Student).where(Student.id == student_id, Student.school_id == school_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def update(
        db: AsyncSession,
        student_id: str,
        school_id: str,
        data: dict[str, Any],
    ) -> Student | None:
        """
        Update a student within a school.

        Returns:
            Updated Student or None if no row matched id + school
        """
        values = _mutable(data)
        if not values:
            return await StudentRepository.get(db, student_id, school_id)

        result = await db.execute(
            update(Student)
            .where(Student.id == student_id, Student.school_id == school_id)
            .values(**values)
            .returning(Student)
        )
        student = result.scalar_one_or_none()
        if student:
            logger.info(f"Updated student {student_id} in school {school_id}: {sorted(values)}")
        return student

    @staticmethod
    async def delete(db: AsyncSession, student_id: str, school_id: str) -> bool:
        """
        Delete a student within a school.

        Returns:
            True if a row was deleted
        """
        result = await db.execute(
            delete(Student)
            .where(Student.id == student_id, Student.school_id == school_id)
            .returning(Student.id)
        )
        deleted = result.scalar_one_or_none() is not None
        if deleted:
            logger.info(f"Deleted student {student_id} from school {school_id}")
        return deleted


def _students_of(school_id: str):
    return select(Student.id).where(Student.school_id == school_id)


class GuardianRepository:
    """Repository for guardian database operations, scoped through the student's school."""

    @staticmethod
    async def create(db: AsyncSession, student_id: str, data: dict[str, Any]) -> Guardian:
        """Create a guardian. The caller must have checked the student's school."""
        guardian = Guardian(**_mutable(data), student_id=student_id)

        db.add(guardian)
        await db.flush()
        await db.refresh(guardian)

        logger.info(f"Created guardian {guardian.id} for student {student_id}")
        return guardian

    @staticmethod
    async def list_for_student(
        db: AsyncSession,
        student_id: str,
        school_id: str,
    ) -> list[Guardian]:
        result = await db.execute(
            select(Guardian)
            .where(
                Guardian.student_id == student_id,
                Guardian.student_id.in_(_students_of(school_id)),
            )
            .order_by(Guardian.created_at)
        )
        return list(result.scalars().all())

    @staticmethod
    async def update(
        db: AsyncSession,
        guardian_id: str,
        student_id: str,
        school_id: str,
        data: dict[str, Any],
    ) -> Guardian | None:
        values = _mutable(data)
        conditions = (
            Guardian.id == guardian_id,
            Guardian.student_id == student_id,
            Guardian.student_id.in_(_students_of(school_id)),
        )
        if not values:
            result = await db.execute(select(Guardian).where(*conditions))
            return result.scalar_one_or_none()

        result = await db.execute(
            update(Guardian).where(*conditions).values(**values).returning(Guardian)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def delete(
        db: AsyncSession,
        guardian_id: str,
        student_id: str,
        school_id: str,
    ) -> bool:
        result = await db.execute(
            delete(Guardian)
            .where(
                Guardian.id == guardian_id,
                Guardian.student_id == student_id,
                Guardian.student_id.in_(_students_of(school_id)),
            )
            .returning(Guardian.id)
        )
        deleted = result.scalar_one_or_none() is not None
        if deleted:
            logger.info(f"Deleted guardian {guardian_id} of student {student_id}")
        return deleted
