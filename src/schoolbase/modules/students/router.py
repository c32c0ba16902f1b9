"""
School Students Router

Tenant-scoped student and guardian endpoints.

Endpoints:
- GET /schools/my/students - List students of the caller's school
- POST /schools/my/students - Add a student to the caller's school
- GET /schools/my/students/{student_id} - Get a student
- PUT /schools/my/students/{student_id} - Update a student
- DELETE /schools/my/students/{student_id} - Delete a student (SchoolAdmin)
- GET/POST /schools/my/students/{student_id}/guardians - Guardians of a student
- PUT/DELETE /schools/my/students/{student_id}/guardians/{guardian_id}
- GET /schools/{school_id}/students - List students of a named school

Security:
- "/my/" routes take the school from the caller's profile; platform roles
  get no bypass there and are rejected with TENANT_REQUIRED
- "/{school_id}/" routes compare the path school with the caller's school;
  platform roles bypass the comparison
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.auth import Principal, require_roles
from schoolbase.core.database import get_db
from schoolbase.core.errors import NotFoundError
from schoolbase.core.roles import UserRole
from schoolbase.core.tenancy import require_tenant_access
from schoolbase.modules.students import service
from schoolbase.modules.students.schemas import (
    GuardianCreate,
    GuardianResponse,
    GuardianUpdate,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()

STUDENT_READERS = (
    UserRole.SCHOOL_ADMIN,
    UserRole.SCHOOL_DATA_EDITOR,
    UserRole.CLASS_TEACHER,
    UserRole.TEACHER,
    UserRole.PARENT,
)
STUDENT_WRITERS = (UserRole.SCHOOL_ADMIN, UserRole.SCHOOL_DATA_EDITOR)
STUDENT_DELETERS = (UserRole.SCHOOL_ADMIN,)
CROSS_SCHOOL_READERS = (
    UserRole.SUPER_ADMIN,
    UserRole.APP_MANAGER_MANAGEMENT,
    UserRole.SCHOOL_ADMIN,
)

student_reader = require_roles(*STUDENT_READERS)
student_writer = require_roles(*STUDENT_WRITERS)
student_deleter = require_roles(*STUDENT_DELETERS)
cross_school_reader = require_roles(*CROSS_SCHOOL_READERS)

# Effective school for "/my/" routes: always the caller's own
reader_school = require_tenant_access(student_reader, field=None, allow_platform_bypass=False)
writer_school = require_tenant_access(student_writer, field=None, allow_platform_bypass=False)
deleter_school = require_tenant_access(student_deleter, field=None, allow_platform_bypass=False)

# Effective school for "/{school_id}/" routes
named_school = require_tenant_access(
    cross_school_reader, field="school_id", allow_platform_bypass=True
)


# ============================================
# Students
# ============================================


@router.get("/my/students", response_model=list[StudentResponse], summary="List Students")
async def list_students(
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(reader_school),
) -> list[StudentResponse]:
    students = await service.list_students(db, school_id)
    return [StudentResponse.model_validate(s) for s in students]


@router.post(
    "/my/students",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Student",
)
async def create_student(
    data: StudentCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(student_writer),
    school_id: str = Depends(writer_school),
) -> StudentResponse:
    student = await service.create_student(db, school_id, data)
    logger.info(f"{principal} created student {student.id}")
    return StudentResponse.model_validate(student)


@router.get(
    "/my/students/{student_id}",
    response_model=StudentResponse,
    summary="Get Student",
)
async def get_student(
    student_id: UUID,
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(reader_school),
) -> StudentResponse:
    student = await service.get_student(db, str(student_id), school_id)
    if student is None:
        raise NotFoundError("student", service.STUDENT_NOT_FOUND_MESSAGE)
    return StudentResponse.model_validate(student)


@router.put(
    "/my/students/{student_id}",
    response_model=StudentResponse,
    summary="Update Student",
)
async def update_student(
    student_id: UUID,
    data: StudentUpdate,
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(writer_school),
) -> StudentResponse:
    student = await service.update_student(db, str(student_id), school_id, data)
    return StudentResponse.model_validate(student)


@router.delete(
    "/my/students/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Student",
)
async def delete_student(
    student_id: UUID,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(student_deleter),
    school_id: str = Depends(deleter_school),
) -> Response:
    await service.delete_student(db, str(student_id), school_id)
    logger.info(f"{principal} deleted student {student_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================
# Guardians
# ============================================


@router.get(
    "/my/students/{student_id}/guardians",
    response_model=list[GuardianResponse],
    summary="List Guardians",
)
async def list_guardians(
    student_id: UUID,
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(reader_school),
) -> list[GuardianResponse]:
    guardians = await service.list_guardians(db, str(student_id), school_id)
    return [GuardianResponse.model_validate(g) for g in guardians]


@router.post(
    "/my/students/{student_id}/guardians",
    response_model=GuardianResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add Guardian",
)
async def create_guardian(
    student_id: UUID,
    data: GuardianCreate,
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(writer_school),
) -> GuardianResponse:
    guardian = await service.create_guardian(db, str(student_id), school_id, data)
    return GuardianResponse.model_validate(guardian)


@router.put(
    "/my/students/{student_id}/guardians/{guardian_id}",
    response_model=GuardianResponse,
    summary="Update Guardian",
)
async def update_guardian(
    student_id: UUID,
    guardian_id: UUID,
    data: GuardianUpdate,
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(writer_school),
) -> GuardianResponse:
    guardian = await service.update_guardian(
        db, str(guardian_id), str(student_id), school_id, data
    )
    return GuardianResponse.model_validate(guardian)


@router.delete(
    "/my/students/{student_id}/guardians/{guardian_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Guardian",
)
async def delete_guardian(
    student_id: UUID,
    guardian_id: UUID,
    db: AsyncSession = Depends(get_db),
    school_id: str = Depends(writer_school),
) -> Response:
    await service.delete_guardian(db, str(guardian_id), str(student_id), school_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================
# Explicit school
# ============================================


@router.get(
    "/{school_id}/students",
    response_model=list[StudentResponse],
    summary="List Students of a School",
)
async def list_school_students(
    school_id: UUID,
    db: AsyncSession = Depends(get_db),
    effective_school_id: str = Depends(named_school),
) -> list[StudentResponse]:
    """Platform staff may read any school; a SchoolAdmin only their own."""
    students = await service.list_students(db, effective_school_id or str(school_id))
    return [StudentResponse.model_validate(s) for s in students]
