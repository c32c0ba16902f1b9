"""
Tests for the role catalog.
"""

from schoolbase.core.roles import (
    ALL_ROLES,
    PLATFORM_ROLES,
    TENANT_ROLES,
    RoleFamily,
    UserRole,
)


class TestRoleFamilies:
    """Every role carries an explicit family."""

    def test_platform_roles(self):
        assert set(PLATFORM_ROLES) == {
            UserRole.SUPER_ADMIN,
            UserRole.APP_MANAGER_MANAGEMENT,
            UserRole.APP_MANAGER_SALES,
            UserRole.APP_MANAGER_FINANCE,
            UserRole.APP_MANAGER_SUPPORT,
        }

    def test_tenant_roles_are_not_platform(self):
        assert UserRole.SCHOOL_ADMIN in TENANT_ROLES
        assert UserRole.STUDENT_USER in TENANT_ROLES
        assert all(role.family is RoleFamily.TENANT for role in TENANT_ROLES)

    def test_families_partition_all_roles(self):
        assert len(ALL_ROLES) == 13
        assert set(PLATFORM_ROLES) | set(TENANT_ROLES) == set(ALL_ROLES)
        assert not set(PLATFORM_ROLES) & set(TENANT_ROLES)


class TestRoleValues:
    def test_lookup_by_stored_value(self):
        """Profiles store the external role string."""
        assert UserRole("AppManager_Sales") is UserRole.APP_MANAGER_SALES
        assert UserRole("Student_User") is UserRole.STUDENT_USER

    def test_role_compares_as_string(self):
        assert UserRole.PARENT == "Parent"
        assert UserRole.SUPER_ADMIN.value == "SuperAdmin"
