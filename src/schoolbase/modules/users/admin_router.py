"""
Platform Users Router

- GET /platform/users - List every user profile (SuperAdmin only)
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.auth import Principal, require_roles
from schoolbase.core.database import get_db
from schoolbase.core.roles import UserRole
from schoolbase.modules.auth.schemas import ProfileResponse
from schoolbase.modules.users import service

router = APIRouter()


@router.get("", response_model=list[ProfileResponse], summary="List Platform Users")
async def list_users(
    db: AsyncSession = Depends(get_db),
    _principal: Principal = Depends(require_roles(UserRole.SUPER_ADMIN)),
) -> list[ProfileResponse]:
    profiles = await service.list_profiles(db)
    return [ProfileResponse.model_validate(p) for p in profiles]
