"""Profile schemas for the authenticated user."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from schoolbase.core.roles import UserRole
from schoolbase.core.validation import UrlStr


class ProfileUpdate(BaseModel):
    """
    Request body for PUT /auth/me.

    role and school_id are not accepted; extra fields are ignored.
    """

    full_name: str | None = Field(None, min_length=1, max_length=200)
    phone_number: str | None = Field(None, max_length=20)
    address: str | None = None
    profile_photo_url: UrlStr | None = None


class ProfileResponse(BaseModel):
    """User profile as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    school_id: str | None = None
    role: UserRole
    full_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    profile_photo_url: str | None = None
    created_at: datetime
    updated_at: datetime
