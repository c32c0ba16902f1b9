"""Authenticated user's own profile."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.auth import Principal, get_current_principal
from schoolbase.core.database import get_db
from schoolbase.core.errors import NotFoundError
from schoolbase.modules.auth.schemas import ProfileResponse, ProfileUpdate
from schoolbase.modules.users import service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> ProfileResponse:
    """
    Get the profile of the currently authenticated user.

    Raises:
        NotFoundError 404: Profile vanished between authentication and lookup
    """
    profile = await service.get_profile(db, principal.id)
    if profile is None:
        raise NotFoundError("profile", "User profile not found.")
    return ProfileResponse.model_validate(profile)


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    data: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> ProfileResponse:
    """Update the editable fields of the caller's own profile."""
    profile = await service.update_profile(
        db,
        principal.id,
        data.model_dump(exclude_unset=True, exclude_none=True),
    )
    logger.info(f"{principal} updated own profile")
    return ProfileResponse.model_validate(profile)
