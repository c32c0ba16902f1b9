"""
Platform Schools Router

Tenant management endpoints for platform staff.

Endpoints:
- POST /platform/schools - Create a school (SuperAdmin, AppManager_Management)
- GET /platform/schools - List schools (all platform roles)
- GET /platform/schools/{school_id} - Get a school (all platform roles)
- PUT /platform/schools/{school_id} - Update a school (SuperAdmin, AppManager_Management)
- DELETE /platform/schools/{school_id} - Delete a school (SuperAdmin)

Read access is deliberately wider than write access: sales, finance and
support managers can look schools up but not change them.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.auth import Principal, require_roles
from schoolbase.core.database import get_db
from schoolbase.core.errors import NotFoundError
from schoolbase.core.roles import UserRole
from schoolbase.modules.schools import service
from schoolbase.modules.schools.schemas import SchoolCreate, SchoolResponse, SchoolUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

SCHOOL_WRITERS = (UserRole.SUPER_ADMIN, UserRole.APP_MANAGER_MANAGEMENT)
SCHOOL_READERS = (
    UserRole.SUPER_ADMIN,
    UserRole.APP_MANAGER_MANAGEMENT,
    UserRole.APP_MANAGER_SALES,
    UserRole.APP_MANAGER_FINANCE,
    UserRole.APP_MANAGER_SUPPORT,
)
SCHOOL_DELETERS = (UserRole.SUPER_ADMIN,)

school_writer = require_roles(*SCHOOL_WRITERS)
school_reader = require_roles(*SCHOOL_READERS)
school_deleter = require_roles(*SCHOOL_DELETERS)


@router.post(
    "",
    response_model=SchoolResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create School",
)
async def create_school(
    data: SchoolCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(school_writer),
) -> SchoolResponse:
    """Create a new school tenant."""
    school = await service.create_school(db, data)
    logger.info(f"{principal} created school {school.id}")
    return SchoolResponse.model_validate(school)


@router.get("", response_model=list[SchoolResponse], summary="List Schools")
async def list_schools(
    db: AsyncSession = Depends(get_db),
    _principal: Principal = Depends(school_reader),
) -> list[SchoolResponse]:
    schools = await service.list_schools(db)
    return [SchoolResponse.model_validate(school) for school in schools]


@router.get("/{school_id}", response_model=SchoolResponse, summary="Get School")
async def get_school(
    school_id: UUID,
    db: AsyncSession = Depends(get_db),
    _principal: Principal = Depends(school_reader),
) -> SchoolResponse:
    school = await service.get_school(db, str(school_id))
    if school is None:
        raise NotFoundError("school")
    return SchoolResponse.model_validate(school)


@router.put("/{school_id}", response_model=SchoolResponse, summary="Update School")
async def update_school(
    school_id: UUID,
    data: SchoolUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(school_writer),
) -> SchoolResponse:
    school = await service.update_school(db, str(school_id), data)
    logger.info(f"{principal} updated school {school_id}")
    return SchoolResponse.model_validate(school)


@router.delete(
    "/{school_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete School",
)
async def delete_school(
    school_id: UUID,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(school_deleter),
) -> Response:
    """Delete a school and, by cascade, its students."""
    await service.delete_school(db, str(school_id))
    logger.warning(f"{principal} deleted school {school_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
