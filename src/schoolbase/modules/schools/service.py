"""
School Service Layer

Platform-level tenant management. Each function delegates to the
repository and maps store failures to typed errors.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.errors import NotFoundError, store_errors
from schoolbase.modules.schools.models import School
from schoolbase.modules.schools.repository import SchoolRepository
from schoolbase.modules.schools.schemas import SchoolCreate, SchoolUpdate

logger = logging.getLogger(__name__)


async def create_school(db: AsyncSession, data: SchoolCreate) -> School:
    with store_errors("Failed to create school.", "SCHOOL_CREATION_ERROR"):
        return await SchoolRepository.create(db, data.model_dump())


async def list_schools(db: AsyncSession) -> list[School]:
    with store_errors("Failed to retrieve schools.", "SCHOOL_FETCH_ERROR"):
        return await SchoolRepository.list_all(db)


async def get_school(db: AsyncSession, school_id: str) -> School | None:
    """Return the school, or None if it does not exist."""
    with store_errors("Failed to retrieve school.", "SCHOOL_FETCH_ERROR"):
        return await SchoolRepository.get_by_id(db, school_id)


async def update_school(db: AsyncSession, school_id: str, data: SchoolUpdate) -> School:
    """
    Apply the fields present in ``data``.

    Raises:
        NotFoundError: SCHOOL_NOT_FOUND if no school has this id
    """
    with store_errors("Failed to update school.", "SCHOOL_UPDATE_ERROR"):
        school = await SchoolRepository.update(
            db,
            school_id,
            data.model_dump(exclude_unset=True, exclude_none=True),
        )

    if school is None:
        raise NotFoundError("school", "School not found for update.")
    return school


async def delete_school(db: AsyncSession, school_id: str) -> None:
    """
    Raises:
        NotFoundError: SCHOOL_NOT_FOUND if no school has this id
    """
    with store_errors("Failed to delete school.", "SCHOOL_DELETION_ERROR"):
        deleted = await SchoolRepository.delete(db, school_id)

    if not deleted:
        raise NotFoundError("school")
