"""
Role Catalog

Closed set of principal roles. Every role carries an explicit family:
platform roles operate across all schools, tenant roles are bound to
exactly one school.
"""

from enum import Enum


class RoleFamily(str, Enum):
    """Scope of a role."""

    PLATFORM = "platform"
    TENANT = "tenant"


class UserRole(str, Enum):
    """User roles in the system, tagged with their family."""

    family: RoleFamily

    def __new__(cls, value: str, family: RoleFamily):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.family = family
        return obj

    # Platform roles
    SUPER_ADMIN = ("SuperAdmin", RoleFamily.PLATFORM)
    APP_MANAGER_MANAGEMENT = ("AppManager_Management", RoleFamily.PLATFORM)
    APP_MANAGER_SALES = ("AppManager_Sales", RoleFamily.PLATFORM)
    APP_MANAGER_FINANCE = ("AppManager_Finance", RoleFamily.PLATFORM)
    APP_MANAGER_SUPPORT = ("AppManager_Support", RoleFamily.PLATFORM)

    # School (tenant) roles
    SCHOOL_ADMIN = ("SchoolAdmin", RoleFamily.TENANT)
    SCHOOL_DATA_EDITOR = ("SchoolDataEditor", RoleFamily.TENANT)
    SCHOOL_FINANCE_MANAGER = ("SchoolFinanceManager", RoleFamily.TENANT)
    CLASS_TEACHER = ("ClassTeacher", RoleFamily.TENANT)
    TEACHER = ("Teacher", RoleFamily.TENANT)
    PARENT = ("Parent", RoleFamily.TENANT)
    SUBSCRIBER = ("Subscriber", RoleFamily.TENANT)
    STUDENT_USER = ("Student_User", RoleFamily.TENANT)

    @property
    def is_platform(self) -> bool:
        return self.family is RoleFamily.PLATFORM


PLATFORM_ROLES: tuple[UserRole, ...] = tuple(r for r in UserRole if r.is_platform)
TENANT_ROLES: tuple[UserRole, ...] = tuple(r for r in UserRole if not r.is_platform)
ALL_ROLES: tuple[UserRole, ...] = tuple(UserRole)


__all__ = ["ALL_ROLES", "PLATFORM_ROLES", "TENANT_ROLES", "RoleFamily", "UserRole"]
