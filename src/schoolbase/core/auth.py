"""
Authentication and Authorization Module

Provides the request-path dependencies that resolve the caller and check
their role:

- ``get_current_principal``: bearer token -> identity provider -> profile
  lookup -> ``Principal`` (attached to ``request.state.principal``)
- ``require_roles(*roles)``: per-route allow-list, bound at registration time

Role and school always come from the ``user_profiles`` table, never from
the token or the request body.
"""

import logging
from collections.abc import Callable, Coroutine, Iterable
from dataclasses import dataclass
from typing import Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from schoolbase.core.database import get_db
from schoolbase.core.errors import (
    AuthInvalidError,
    AuthRequiredError,
    RoleForbiddenError,
    RoleMissingError,
)
from schoolbase.core.identity import IdentityProvider, get_identity_provider
from schoolbase.core.roles import UserRole
from schoolbase.modules.users.repository import UserProfileRepository

logger = logging.getLogger(__name__)

# auto_error=False so a missing header maps to AUTH_REQUIRED instead of
# FastAPI's default 403
security = HTTPBearer(
    auto_error=False,
    description="Supabase access token",
)


@dataclass(frozen=True)
class Principal:
    """
    The authenticated caller for one request.

    Attributes:
        id: Identity-provider user id
        role: Role from the user's profile (None only if the profile has none)
        school_id: Tenant id; None for platform principals
        email: Email reported by the identity provider
    """

    id: str
    role: UserRole | None
    school_id: str | None = None
    email: str | None = None

    @property
    def is_platform(self) -> bool:
        return self.role is not None and self.role.is_platform

    def __str__(self) -> str:
        role = self.role.value if self.role else None
        return f"Principal(id={self.id}, role={role}, school_id={self.school_id})"


async def authenticate(
    token: str | None,
    db: AsyncSession,
    identity_provider: IdentityProvider,
) -> Principal:
    """
    Resolve a raw bearer token to a Principal.

    Raises:
        AuthRequiredError: No token supplied (401)
        AuthInvalidError: Token rejected, or no profile exists (403)
    """
    if not token:
        raise AuthRequiredError()

    identity = await identity_provider.get_identity(token)
    if identity is None:
        raise AuthInvalidError()

    profile = await UserProfileRepository.get_by_user_id(db, identity.id)
    if profile is None:
        logger.warning(f"No profile for authenticated user {identity.id}")
        raise AuthInvalidError("User profile not found or unauthorized.")

    return Principal(
        id=identity.id,
        role=profile.role,
        school_id=profile.school_id,
        email=identity.email,
    )


async def get_current_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> Principal:
    """
    FastAPI dependency that authenticates the request.

    Usage:
        @router.get("/me")
        async def me(principal: Principal = Depends(get_current_principal)):
            ...
    """
    token = credentials.credentials if credentials else None
    principal = await authenticate(token, db, identity_provider)
    request.state.principal = principal

    logger.debug(f"Authenticated {principal}")
    return principal


def check_role(principal: Principal, allowed: Iterable[UserRole]) -> None:
    """
    Permit iff the principal's role is in ``allowed``.

    Raises:
        RoleMissingError: Principal has no role (401)
        RoleForbiddenError: Role not in the allow-list (403)
    """
    if principal.role is None:
        raise RoleMissingError()

    if principal.role not in allowed:
        logger.warning(f"Access denied: {principal} not in {[r.value for r in allowed]}")
        raise RoleForbiddenError(principal.role.value)


def require_roles(
    *allowed: UserRole,
) -> Callable[..., Coroutine[Any, Any, Principal]]:
    """
    Build a dependency that authenticates and then checks the role allow-list.

    Usage:
        @router.post("/schools")
        async def create(
            principal: Principal = Depends(require_roles(UserRole.SUPER_ADMIN)),
        ):
            ...
    """
    allowed_roles = tuple(allowed)

    async def dependency(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        check_role(principal, allowed_roles)
        return principal

    return dependency


__all__ = [
    "Principal",
    "authenticate",
    "check_role",
    "get_current_principal",
    "require_roles",
]
