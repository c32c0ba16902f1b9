"""
Files Router

- POST /files/upload-url - Signed URL for a direct upload to object storage
- GET /files/public-url - Public URL of a stored file

File bytes never pass through this API; the client uploads directly with
the signed URL.
"""

from fastapi import APIRouter, Depends, Query

from schoolbase.core.auth import Principal, require_roles
from schoolbase.core.errors import TenantRequiredError
from schoolbase.core.roles import ALL_ROLES, PLATFORM_ROLES, UserRole
from schoolbase.core.storage import ObjectStore, get_object_store
from schoolbase.core.tenancy import require_tenant_access
from schoolbase.modules.files import service
from schoolbase.modules.files.schemas import (
    PublicUrlResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

router = APIRouter()

UPLOADERS = (
    *PLATFORM_ROLES,
    UserRole.SCHOOL_ADMIN,
    UserRole.SCHOOL_DATA_EDITOR,
    UserRole.CLASS_TEACHER,
    UserRole.TEACHER,
    UserRole.PARENT,
)

uploader = require_roles(*UPLOADERS)
upload_school = require_tenant_access(uploader, field="schoolId", allow_platform_bypass=True)
any_role = require_roles(*ALL_ROLES)


@router.post("/upload-url", response_model=UploadUrlResponse, summary="Create Signed Upload URL")
async def create_upload_url(
    data: UploadUrlRequest,
    principal: Principal = Depends(uploader),
    school_id: str | None = Depends(upload_school),
    store: ObjectStore = Depends(get_object_store),
) -> UploadUrlResponse:
    """
    Issue a signed upload URL under the effective school.

    Platform staff name the target school in the body; school users always
    get their own school.
    """
    if principal.is_platform and data.school_id:
        # Canonical form of the id the tenant gate admitted
        school_id = str(data.school_id)
    if not school_id:
        raise TenantRequiredError()

    return await service.get_signed_upload_url(
        store,
        school_id,
        principal.id,
        data.file_type,
        data.original_file_name,
    )


@router.get("/public-url", response_model=PublicUrlResponse, summary="Get Public File URL")
async def get_public_url(
    file_path: str | None = Query(
        None, alias="filePath", description="Full storage path of the file"
    ),
    _principal: Principal = Depends(any_role),
    store: ObjectStore = Depends(get_object_store),
) -> PublicUrlResponse:
    public_url = await service.get_public_url(store, file_path)
    return PublicUrlResponse(public_url=public_url)
