"""
File Upload Schemas

Field names are camelCase on the wire (fileType, originalFileName,
schoolId, signedUrl, fullPath, publicUrl).
"""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FileCategory(str, Enum):
    """Folder a school upload is filed under."""

    PROFILE_PHOTOS = "profile_photos"
    STUDENT_DOCUMENTS = "student_documents"
    FEED_MEDIA = "feed_media"
    REPORTS = "reports"
    CERTIFICATES = "certificates"
    OTHER_UPLOADS = "other_uploads"


class UploadUrlRequest(BaseModel):
    """
    Request body for POST /files/upload-url.

    schoolId is only honoured for platform roles; school users always
    upload into their own school.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    file_type: FileCategory
    original_file_name: str = Field(..., min_length=1, max_length=255)
    school_id: UUID | None = None


class UploadUrlResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    signed_url: str
    full_path: str


class PublicUrlResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    public_url: str
