"""
Student Schemas

Pydantic schemas for student and guardian payloads. ``*Update`` schemas
accept any subset of fields with the same constraints and no defaults.
Neither schema has a school_id field, so a client-sent school_id is
dropped during validation.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from schoolbase.core.validation import NonEmptyStr, UrlStr


class StudentCreate(BaseModel):
    """Request body for POST /schools/my/students."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date | None = None
    class_name: str | None = Field(None, max_length=100)
    profile_photo_url: UrlStr | None = None
    allergies: list[NonEmptyStr] | None = None
    notes: str | None = None


class StudentUpdate(BaseModel):
    """Request body for PUT /schools/my/students/{student_id}."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    date_of_birth: date | None = None
    class_name: str | None = Field(None, max_length=100)
    profile_photo_url: UrlStr | None = None
    allergies: list[NonEmptyStr] | None = None
    notes: str | None = None


class StudentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    school_id: str
    first_name: str
    last_name: str
    date_of_birth: date | None = None
    class_name: str | None = None
    profile_photo_url: str | None = None
    allergies: list[str] | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class GuardianCreate(BaseModel):
    """Request body for POST /schools/my/students/{student_id}/guardians."""

    name: str = Field(..., min_length=1, max_length=200)
    relation: str | None = Field(None, max_length=50)
    phone_number: str | None = Field(None, max_length=20)
    email: EmailStr | None = None
    profile_photo_url: UrlStr | None = None


class GuardianUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    relation: str | None = Field(None, max_length=50)
    phone_number: str | None = Field(None, max_length=20)
    email: EmailStr | None = None
    profile_photo_url: UrlStr | None = None


class GuardianResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    name: str
    relation: str | None = None
    phone_number: str | None = None
    email: str | None = None
    profile_photo_url: str | None = None
    created_at: datetime
    updated_at: datetime
