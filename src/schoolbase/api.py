from fastapi import APIRouter

from schoolbase.modules.auth import router as auth_router
from schoolbase.modules.files import router as files_router
from schoolbase.modules.schools.router import router as schools_router
from schoolbase.modules.students.router import router as students_router
from schoolbase.modules.users.admin_router import router as platform_users_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(
    schools_router, prefix="/platform/schools", tags=["Platform - Schools"]
)

api_router.include_router(
    platform_users_router, prefix="/platform/users", tags=["Platform - Users"]
)

api_router.include_router(students_router, prefix="/schools", tags=["Students"])

api_router.include_router(files_router, prefix="/files", tags=["Files"])
