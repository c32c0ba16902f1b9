"""
Core module - Configuration, database, authentication, tenancy and errors.
"""

from schoolbase.core.config import get_settings, settings
from schoolbase.core.database import Base, close_db, get_db, init_db
from schoolbase.core.errors import AppError, register_exception_handlers
from schoolbase.core.roles import PLATFORM_ROLES, TENANT_ROLES, UserRole

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    # Roles
    "UserRole",
    "PLATFORM_ROLES",
    "TENANT_ROLES",
    # Errors
    "AppError",
    "register_exception_handlers",
]
