"""
Tenant Isolation

Decides whether a principal may touch a given school's data. This is the
barrier against cross-tenant access; it runs after role authorization and
before any service call. Services still filter every query by school_id.
"""

import json
import logging
from collections.abc import Callable, Coroutine
from typing import Any
from uuid import UUID

from fastapi import Depends, Request

from schoolbase.core.auth import Principal
from schoolbase.core.errors import TenantMismatchError, TenantRequiredError

logger = logging.getLogger(__name__)

DEFAULT_TENANT_FIELD = "school_id"


def _same_school(requested: str, own: str) -> bool:
    """Compare school ids as UUIDs; an unparseable id never matches."""
    try:
        return UUID(str(requested)) == UUID(str(own))
    except ValueError:
        return False


def check_tenant_access(
    principal: Principal,
    requested_school_id: str | None,
    allow_platform_bypass: bool = True,
) -> str | None:
    """
    Admit or reject a request and return its effective school id.

    1. Bypass enabled and platform role: admitted, effective school is the
       requested one (may be None).
    2. Principal without a school: TENANT_REQUIRED.
    3. Requested school differs from the principal's: TENANT_MISMATCH.
    4. Otherwise admitted; effective school is the principal's.

    Raises:
        TenantRequiredError: Tenant-scoped route, principal has no school
        TenantMismatchError: Request names another school
    """
    if allow_platform_bypass and principal.is_platform:
        return requested_school_id

    if not principal.school_id:
        logger.warning(f"Tenant required: {principal} has no school")
        raise TenantRequiredError()

    if requested_school_id and not _same_school(requested_school_id, principal.school_id):
        logger.warning(f"Tenant mismatch: {principal} requested school {requested_school_id}")
        raise TenantMismatchError()

    return principal.school_id


async def _requested_school_id(request: Request, field: str | None) -> str | None:
    """Read the tenant reference from the path, falling back to the JSON body."""
    if field is None:
        return None

    value = request.path_params.get(field)
    if value:
        return str(value)

    if request.method in ("POST", "PUT", "PATCH"):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if isinstance(body, dict) and body.get(field):
            return str(body[field])

    return None


def require_tenant_access(
    principal_dependency: Callable[..., Coroutine[Any, Any, Principal]],
    field: str | None = DEFAULT_TENANT_FIELD,
    allow_platform_bypass: bool = True,
) -> Callable[..., Coroutine[Any, Any, str | None]]:
    """
    Build a dependency enforcing tenant isolation.

    Args:
        principal_dependency: Dependency resolving the (already role-checked)
            principal, usually ``require_roles(...)``
        field: Path parameter / body field carrying the requested school id,
            or None when the route is implicitly scoped to the caller's school
        allow_platform_bypass: Let platform roles skip the check

    Returns:
        Dependency yielding the effective school id for the operation

    Usage:
        @router.get("/my/students")
        async def list_students(
            school_id: str = Depends(
                require_tenant_access(require_roles(*READERS), field=None, allow_platform_bypass=False)
            ),
        ):
            ...
    """

    async def dependency(
        request: Request,
        principal: Principal = Depends(principal_dependency),
    ) -> str | None:
        requested = await _requested_school_id(request, field)
        return check_tenant_access(principal, requested, allow_platform_bypass)

    return dependency


__all__ = ["DEFAULT_TENANT_FIELD", "check_tenant_access", "require_tenant_access"]
