"""
School Schemas

Pydantic schemas for request validation and response serialization.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field

SUBDOMAIN_PATTERN = r"^[a-z0-9-]+$"


class SchoolCreate(BaseModel):
    """Request body for POST /platform/schools."""

    name: str = Field(..., min_length=3, max_length=200)
    subdomain: str = Field(..., min_length=3, max_length=63, pattern=SUBDOMAIN_PATTERN)
    admin_email: EmailStr
    package: str = Field("Basic", min_length=1, max_length=50)
    status: str = Field("Active", min_length=1, max_length=50)
    student_limit: int = Field(0, ge=0)
    teacher_limit: int = Field(0, ge=0)
    admin_limit: int = Field(0, ge=0)
    branding_settings: dict[str, Any] = Field(default_factory=dict)
    module_settings: dict[str, Any] = Field(default_factory=dict)
    timezone: str = Field("UTC", min_length=1, max_length=64)
    currency_code: str = Field("USD", min_length=3, max_length=3)
    academic_year_start: datetime | None = None
    academic_year_end: datetime | None = None


class SchoolUpdate(BaseModel):
    """Request body for PUT /platform/schools/{id}. Every field optional, no defaults."""

    name: str | None = Field(None, min_length=3, max_length=200)
    subdomain: str | None = Field(None, min_length=3, max_length=63, pattern=SUBDOMAIN_PATTERN)
    admin_email: EmailStr | None = None
    package: str | None = Field(None, min_length=1, max_length=50)
    status: str | None = Field(None, min_length=1, max_length=50)
    student_limit: int | None = Field(None, ge=0)
    teacher_limit: int | None = Field(None, ge=0)
    admin_limit: int | None = Field(None, ge=0)
    branding_settings: dict[str, Any] | None = None
    module_settings: dict[str, Any] | None = None
    timezone: str | None = Field(None, min_length=1, max_length=64)
    currency_code: str | None = Field(None, min_length=3, max_length=3)
    academic_year_start: datetime | None = None
    academic_year_end: datetime | None = None


class SchoolResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    subdomain: str
    admin_email: str
    package: str
    status: str
    student_limit: int
    teacher_limit: int
    admin_limit: int
    branding_settings: dict[str, Any]
    module_settings: dict[str, Any]
    timezone: str
    currency_code: str
    academic_year_start: datetime | None = None
    academic_year_end: datetime | None = None
    created_at: datetime
    updated_at: datetime
