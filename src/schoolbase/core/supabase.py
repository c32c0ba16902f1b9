"""
Supabase Client

Process-wide async Supabase client used for the identity provider and
object storage. Created once on application startup and shared read-only
by every request.
"""

from supabase import AsyncClient, acreate_client

from schoolbase.core.config import settings

# Supabase client instance
supabase_client: AsyncClient | None = None


async def init_supabase() -> AsyncClient:
    """
    Initialize the Supabase client.

    Call this on application startup. Uses the service role key so that
    token verification and signed-URL issuance are not subject to RLS.
    """
    global supabase_client
    if supabase_client is None:
        supabase_client = await acreate_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )
    return supabase_client


def get_supabase() -> AsyncClient:
    """
    Return the initialized Supabase client.

    Raises:
        RuntimeError: If called before ``init_supabase``.
    """
    if supabase_client is None:
        raise RuntimeError("Supabase client is not initialized")
    return supabase_client


async def close_supabase() -> None:
    """Drop the client reference on shutdown."""
    global supabase_client
    supabase_client = None
