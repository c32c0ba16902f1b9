"""
Object Storage

Thin adapter over the Supabase Storage bucket holding school uploads.
Clients receive short-lived signed upload URLs and upload directly; file
bytes never pass through this service.
"""

import logging
from typing import Protocol

from supabase import AsyncClient, StorageException

from schoolbase.core.config import settings
from schoolbase.core.errors import StorageError
from schoolbase.core.supabase import get_supabase

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    async def create_signed_upload_url(self, path: str) -> str: ...

    async def get_public_url(self, path: str) -> str: ...


class SupabaseObjectStore:
    """Object store using a Supabase Storage bucket."""

    def __init__(self, client: AsyncClient, bucket: str):
        self._client = client
        self._bucket = bucket

    async def create_signed_upload_url(self, path: str) -> str:
        """
        Request a signed upload URL for exactly ``path``.

        Raises:
            StorageError: If the storage service rejects the request
        """
        try:
            result = await self._client.storage.from_(self._bucket).create_signed_upload_url(path)
        except StorageException as e:
            logger.error(f"Signed upload URL failed for {self._bucket}/{path}: {e}")
            raise StorageError("Failed to generate signed upload URL.", details=str(e)) from e

        signed_url = result.get("signed_url") or result.get("signedUrl")
        if not signed_url:
            raise StorageError("Failed to generate signed upload URL.", details="empty response")
        return signed_url

    async def get_public_url(self, path: str) -> str:
        return await self._client.storage.from_(self._bucket).get_public_url(path)


def get_object_store() -> ObjectStore:
    """FastAPI dependency returning the object store for the uploads bucket."""
    return SupabaseObjectStore(get_supabase(), settings.storage_bucket)


__all__ = ["ObjectStore", "SupabaseObjectStore", "get_object_store"]
