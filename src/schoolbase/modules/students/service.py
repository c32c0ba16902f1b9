"""
Student Service Layer

Tenant-scoped student and guardian operations. ``school_id`` is always the
effective school resolved by the tenant gate; it is passed to every
repository call so the store itself filters by tenant.

Not-found handling:
- get returns None (the router answers 404)
- update/delete matching zero rows raise STUDENT_NOT_FOUND / GUARDIAN_NOT_FOUND
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.errors import NotFoundError, store_errors
from schoolbase.modules.students.models import Guardian, Student
from schoolbase.modules.students.repository import GuardianRepository, StudentRepository
from schoolbase.modules.students.schemas import (
    GuardianCreate,
    GuardianUpdate,
    StudentCreate,
    StudentUpdate,
)

logger = logging.getLogger(__name__)

STUDENT_NOT_FOUND_MESSAGE = "Student not found or not associated with this school."


# ============================================
# Students
# ============================================


async def create_student(db: AsyncSession, school_id: str, data: StudentCreate) -> Student:
    with store_errors("Failed to create student.", "STUDENT_CREATION_ERROR"):
        return await StudentRepository.create(db, school_id, data.model_dump())


async def list_students(db: AsyncSession, school_id: str) -> list[Student]:
    with store_errors("Failed to retrieve students for this school.", "STUDENT_FETCH_ERROR"):
        return await StudentRepository.list_by_school(db, school_id)


async def get_student(db: AsyncSession, student_id: str, school_id: str) -> Student | None:
    """Return the student if it exists in ``school_id``, else None."""
    with store_errors("Failed to retrieve student.", "STUDENT_FETCH_ERROR"):
        return await StudentRepository.get(db, student_id, school_id)


async def update_student(
    db: AsyncSession,
    student_id: str,
    school_id: str,
    data: StudentUpdate,
) -> Student:
    """
    Apply the fields present in ``data``. The student's school never changes.

    Raises:
        NotFoundError: STUDENT_NOT_FOUND if id + school match no row
    """
    with store_errors("Failed to update student.", "STUDENT_UPDATE_ERROR"):
        student = await StudentRepository.update(
            db,
            student_id,
            school_id,
            data.model_dump(exclude_unset=True, exclude_none=True),
        )

    if student is None:
        raise NotFoundError("student", STUDENT_NOT_FOUND_MESSAGE)
    return student


async def delete_student(db: AsyncSession, student_id: str, school_id: str) -> None:
    """
    Raises:
        NotFoundError: STUDENT_NOT_FOUND if id + school match no row
    """
    with store_errors("Failed to delete student.", "STUDENT_DELETION_ERROR"):
        deleted = await StudentRepository.delete(db, student_id, school_id)

    if not deleted:
        raise NotFoundError("student", STUDENT_NOT_FOUND_MESSAGE)


# ============================================
# Guardians
# ============================================


async def _require_student(db: AsyncSession, student_id: str, school_id: str) -> Student:
    student = await get_student(db, student_id, school_id)
    if student is None:
        raise NotFoundError("student", STUDENT_NOT_FOUND_MESSAGE)
    return student


async def list_guardians(db: AsyncSession, student_id: str, school_id: str) -> list[Guardian]:
    await _require_student(db, student_id, school_id)
    with store_errors("Failed to retrieve guardians.", "GUARDIAN_FETCH_ERROR"):
        return await GuardianRepository.list_for_student(db, student_id, school_id)


async def create_guardian(
    db: AsyncSession,
    student_id: str,
    school_id: str,
    data: GuardianCreate,
) -> Guardian:
    """
    Raises:
        NotFoundError: STUDENT_NOT_FOUND if the student is not in ``school_id``
    """
    await _require_student(db, student_id, school_id)
    with store_errors("Failed to create guardian.", "GUARDIAN_CREATION_ERROR"):
        return await GuardianRepository.create(db, student_id, data.model_dump())


async def update_guardian(
    db: AsyncSession,
    guardian_id: str,
    student_id: str,
    school_id: str,
    data: GuardianUpdate,
) -> Guardian:
    with store_errors("Failed to update guardian.", "GUARDIAN_UPDATE_ERROR"):
        guardian = await GuardianRepository.update(
            db,
            guardian_id,
            student_id,
            school_id,
            data.model_dump(exclude_unset=True, exclude_none=True),
        )

    if guardian is None:
        raise NotFoundError("guardian")
    return guardian


async def delete_guardian(
    db: AsyncSession,
    guardian_id: str,
    student_id: str,
    school_id: str,
) -> None:
    with store_errors("Failed to delete guardian.", "GUARDIAN_DELETION_ERROR"):
        deleted = await GuardianRepository.delete(db, guardian_id, student_id, school_id)

    if not deleted:
        raise NotFoundError("guardian")
