"""
School Repository

Database operations for school management.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.modules.schools.models import School

logger = logging.getLogger(__name__)


class SchoolRepository:
    """Repository for school database operations."""

    @staticmethod
    async def create(db: AsyncSession, data: dict[str, Any]) -> School:
        """
        Create a new school record.

        Args:
            db: Database session
            data: Validated school fields

        Returns:
            Created School instance
        """
        school = School(**data)

        db.add(school)
        await db.flush()
        await db.refresh(school)

        logger.info(f"Created school: {school.id} - {school.name}")
        return school

    @staticmethod
    async def list_all(db: AsyncSession) -> list[School]:
        result = await db.execute(select(School).order_by(School.created_at))
        return list(result.scalars().all())

    @staticmethod
    async def get_by_id(db: AsyncSession, school_id: str | UUID) -> School | None:
        """
        Get a school by ID.

        Args:
            db: Database session
            school_id: School UUID

        Returns:
            School instance or None if not found
        """
        result = await db.execute(select(School).where(School.id == str(school_id)))
        return result.scalar_one_or_none()

    @staticmethod
    async def update(
        db: AsyncSession,
        school_id: str | UUID,
        data: dict[str, Any],
    ) -> School | None:
        """
        Update a school's fields.

        Returns:
            Updated School instance or None if not found
        """
        values = {k: v for k, v in data.items() if k not in ("id", "created_at", "updated_at")}
        if not values:
            return await SchoolRepository.get_by_id(db, school_id)

        result = await db.execute(
            update(School).where(School.id == str(school_id)).values(**values).returning(School)
        )
        school = result.scalar_one_or_none()
        if school:
            logger.info(f"Updated school {school_id}: {sorted(values)}")
        return school

    @staticmethod
    async def delete(db: AsyncSession, school_id: str | UUID) -> bool:
        """
        Delete a school by ID.

        Returns:
            True if a row was deleted
        """
        result = await db.execute(
            delete(School).where(School.id == str(school_id)).returning(School.id)
        )
        deleted = result.scalar_one_or_none() is not None
        if deleted:
            logger.info(f"Deleted school {school_id}")
        return deleted
