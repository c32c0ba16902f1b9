"""
File Service Layer

Builds collision-resistant storage paths for school uploads and delegates
signed-URL issuance to the object store. The returned path is not
persisted here; callers store it on whatever record references the file.

Path layout:
    <prefix>/<school_id>/<category>/<uuid4>.<extension>
"""

import logging
import uuid

from schoolbase.core.config import settings
from schoolbase.core.errors import InvalidInputError, NotFoundError
from schoolbase.core.storage import ObjectStore
from schoolbase.modules.files.schemas import FileCategory, UploadUrlResponse

logger = logging.getLogger(__name__)


def file_extension(original_file_name: str) -> str:
    """
    Return the extension of ``original_file_name`` without the dot.

    Raises:
        InvalidInputError: If there is no usable extension
    """
    base_name = original_file_name.replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, extension = base_name.rpartition(".")
    if not dot or not stem or not extension or not extension.isalnum():
        raise InvalidInputError("Invalid file name: Missing extension.")
    return extension


def build_upload_path(school_id: str, category: FileCategory, original_file_name: str) -> str:
    extension = file_extension(original_file_name)
    return (
        f"{settings.upload_path_prefix}/{school_id}/{category.value}/{uuid.uuid4()}.{extension}"
    )


async def get_signed_upload_url(
    store: ObjectStore,
    school_id: str,
    user_id: str,
    category: FileCategory,
    original_file_name: str,
) -> UploadUrlResponse:
    """
    Issue a signed upload URL for a new file in ``school_id``.

    Raises:
        InvalidInputError: Filename has no extension (400)
        StorageError: Object store rejected the request (500)
    """
    full_path = build_upload_path(school_id, category, original_file_name)
    signed_url = await store.create_signed_upload_url(full_path)

    logger.info(f"User {user_id} issued upload URL for {full_path}")
    return UploadUrlResponse(signed_url=signed_url, full_path=full_path)


async def get_public_url(store: ObjectStore, file_path: str | None) -> str:
    """
    Raises:
        InvalidInputError: No path given
        NotFoundError: FILE_NOT_FOUND if the store returns no URL
    """
    if not file_path:
        raise InvalidInputError("File path is required as a query parameter.")

    public_url = await store.get_public_url(file_path)
    if not public_url:
        logger.warning(f"Could not get public URL for path: {file_path}")
        raise NotFoundError(
            "file",
            "Could not retrieve public URL for the given path. Ensure file exists and is public.",
        )
    return public_url
