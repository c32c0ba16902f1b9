"""
User Profile Service Layer
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.errors import NotFoundError, store_errors
from schoolbase.modules.users.models import UserProfile
from schoolbase.modules.users.repository import UserProfileRepository


async def get_profile(db: AsyncSession, user_id: str) -> UserProfile | None:
    """Return the caller's profile, or None if it does not exist."""
    with store_errors("Failed to retrieve user profile.", "PROFILE_FETCH_ERROR"):
        return await UserProfileRepository.get_by_user_id(db, user_id)


async def update_profile(db: AsyncSession, user_id: str, data: dict[str, Any]) -> UserProfile:
    """
    Update the caller's own profile. Role, school and identity are not editable.

    Raises:
        NotFoundError: PROFILE_NOT_FOUND if the user has no profile row
    """
    with store_errors("Failed to update user profile.", "PROFILE_UPDATE_ERROR"):
        profile = await UserProfileRepository.update(db, user_id, data)

    if profile is None:
        raise NotFoundError("profile", "User profile not found for update.")
    return profile


async def list_profiles(db: AsyncSession) -> list[UserProfile]:
    with store_errors("Failed to retrieve all user profiles.", "PROFILES_FETCH_ERROR"):
        return await UserProfileRepository.list_all(db)
