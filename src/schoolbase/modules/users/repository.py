"""
User Profile Repository

Database operations for user profiles.
"""

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.roles import UserRole
from schoolbase.modules.users.models import UserProfile

logger = logging.getLogger(__name__)

# Columns a user may never change on their own profile
PROTECTED_FIELDS = frozenset({"id", "user_id", "school_id", "role", "created_at", "updated_at"})


class UserProfileRepository:
    """Repository for user profile database operations."""

    @staticmethod
    async def get_by_user_id(db: AsyncSession, user_id: str) -> UserProfile | None:
        """
        Get a profile by identity-provider user id.

        Args:
            db: Database session
            user_id: auth.users id

        Returns:
            UserProfile instance or None if not found
        """
        result = await db.execute(select(UserProfile).where(UserProfile.user_id == str(user_id)))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(db: AsyncSession) -> list[UserProfile]:
        result = await db.execute(select(UserProfile).order_by(UserProfile.created_at))
        return list(result.scalars().all())

    @staticmethod
    async def update(
        db: AsyncSession,
        user_id: str,
        data: dict[str, Any],
    ) -> UserProfile | None:
        """
        Update a profile's editable fields.

        Identity, tenant and role columns are dropped from ``data``.

        Returns:
            Updated UserProfile or None if no row matched
        """
        values = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
        if not values:
            return await UserProfileRepository.get_by_user_id(db, user_id)

        result = await db.execute(
            update(UserProfile)
            .where(UserProfile.user_id == str(user_id))
            .values(**values)
            .returning(UserProfile)
        )
        profile = result.scalar_one_or_none()
        if profile:
            logger.info(f"Updated profile for user {user_id}: {sorted(values)}")
        return profile

    @staticmethod
    async def create(
        db: AsyncSession,
        *,
        user_id: str,
        role: UserRole,
        school_id: str | None = None,
        full_name: str | None = None,
    ) -> UserProfile:
        """Create a profile row (used by the seed script)."""
        profile = UserProfile(
            user_id=user_id,
            role=role,
            school_id=school_id,
            full_name=full_name,
        )
        db.add(profile)
        await db.flush()
        await db.refresh(profile)

        logger.info(f"Created profile for user {user_id} ({profile.role.value})")
        return profile
