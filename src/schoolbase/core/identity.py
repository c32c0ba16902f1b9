"""
Identity Provider

Verifies bearer tokens against Supabase Auth and returns the identity they
belong to. Role and school are not read from the token; they come from the
``user_profiles`` table (see ``schoolbase.core.auth``).
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from supabase import AsyncClient, AuthError

from schoolbase.core.supabase import get_supabase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """A verified identity-provider user."""

    id: str
    email: str | None = None


class IdentityProvider(Protocol):
    async def get_identity(self, token: str) -> Identity | None: ...


class SupabaseIdentityProvider:
    """Identity provider backed by ``supabase.auth.get_user``."""

    def __init__(self, client: AsyncClient):
        self._client = client

    async def get_identity(self, token: str) -> Identity | None:
        """
        Resolve an access token to an identity.

        Args:
            token: Raw bearer token

        Returns:
            Identity, or None if Supabase rejects the token or knows no user
        """
        try:
            response = await self._client.auth.get_user(token)
        except AuthError as e:
            logger.warning(f"Supabase rejected access token: {e}")
            return None

        if response is None or response.user is None:
            return None

        return Identity(id=str(response.user.id), email=response.user.email)


def get_identity_provider() -> IdentityProvider:
    """FastAPI dependency returning the identity provider."""
    return SupabaseIdentityProvider(get_supabase())


__all__ = ["Identity", "IdentityProvider", "SupabaseIdentityProvider", "get_identity_provider"]
