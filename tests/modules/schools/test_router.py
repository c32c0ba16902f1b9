"""
HTTP tests for the platform schools endpoints.

Read access covers every platform role; create and update are limited to
SuperAdmin and AppManager_Management; delete to SuperAdmin.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch

import pytest

from schoolbase.core.roles import UserRole
from schoolbase.modules.schools.models import School
from tests.factories import SCHOOL_1, make_principal

SCHOOLS_URL = "/api/v1/platform/schools"
REPOSITORY = "schoolbase.modules.schools.service.SchoolRepository"


def make_school(**overrides) -> School:
    now = datetime.now(UTC)
    fields = {
        "id": SCHOOL_1,
        "name": "Hillside Academy",
        "subdomain": "hillside",
        "admin_email": "admin@hillside.edu",
        "package": "Basic",
        "status": "Active",
        "student_limit": 0,
        "teacher_limit": 0,
        "admin_limit": 0,
        "branding_settings": {},
        "module_settings": {},
        "timezone": "UTC",
        "currency_code": "USD",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return School(**fields)


class TestCreateSchool:
    def test_app_manager_management_creates(self, client, login):
        login(make_principal(UserRole.APP_MANAGER_MANAGEMENT))

        with patch(REPOSITORY) as mock_repo:
            mock_repo.create = AsyncMock(return_value=make_school())

            response = client.post(
                SCHOOLS_URL,
                json={
                    "name": "Hillside Academy",
                    "subdomain": "hillside",
                    "admin_email": "admin@hillside.edu",
                },
            )

        assert response.status_code == 201
        assert response.json()["package"] == "Basic"

    @pytest.mark.parametrize(
        "role",
        [UserRole.APP_MANAGER_SALES, UserRole.APP_MANAGER_FINANCE, UserRole.SCHOOL_ADMIN],
    )
    def test_other_roles_forbidden(self, client, login, role):
        login(make_principal(role, SCHOOL_1 if not role.is_platform else None))

        response = client.post(SCHOOLS_URL, json={})

        assert response.status_code == 403
        assert response.json()["code"] == "ROLE_FORBIDDEN"

    def test_validation_failure(self, client, login, super_admin):
        login(super_admin)

        response = client.post(
            SCHOOLS_URL,
            json={"name": "Hi", "subdomain": "Bad Subdomain!", "student_limit": -1},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_FAILED"
        paths = {d["path"] for d in body["details"]}
        assert paths == {"name", "subdomain", "admin_email", "student_limit"}


class TestReadSchools:
    @pytest.mark.parametrize("role", [UserRole.APP_MANAGER_SALES, UserRole.APP_MANAGER_SUPPORT])
    def test_platform_readers_list(self, client, login, role):
        login(make_principal(role))

        with patch(REPOSITORY) as mock_repo:
            mock_repo.list_all = AsyncMock(return_value=[make_school()])

            response = client.get(SCHOOLS_URL)

        assert response.status_code == 200
        assert response.json()[0]["subdomain"] == "hillside"

    def test_school_admin_cannot_list(self, client, login, school_admin):
        login(school_admin)

        response = client.get(SCHOOLS_URL)

        assert response.status_code == 403

    def test_get_missing_school(self, client, login, super_admin):
        login(super_admin)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            response = client.get(f"{SCHOOLS_URL}/{SCHOOL_1}")

        assert response.status_code == 404
        assert response.json()["code"] == "SCHOOL_NOT_FOUND"


class TestUpdateSchool:
    def test_sales_cannot_update(self, client, login):
        login(make_principal(UserRole.APP_MANAGER_SALES))

        response = client.put(f"{SCHOOLS_URL}/{SCHOOL_1}", json={"status": "Suspended"})

        assert response.status_code == 403

    def test_update(self, client, login, super_admin):
        login(super_admin)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.update = AsyncMock(return_value=make_school(status="Suspended"))

            response = client.put(f"{SCHOOLS_URL}/{SCHOOL_1}", json={"status": "Suspended"})

        assert response.status_code == 200
        assert response.json()["status"] == "Suspended"


class TestDeleteSchool:
    def test_only_super_admin_deletes(self, client, login):
        login(make_principal(UserRole.APP_MANAGER_MANAGEMENT))

        response = client.delete(f"{SCHOOLS_URL}/{SCHOOL_1}")

        assert response.status_code == 403

    def test_delete(self, client, login, super_admin):
        login(super_admin)

        with patch(REPOSITORY) as mock_repo:
            mock_repo.delete = AsyncMock(return_value=True)

            response = client.delete(f"{SCHOOLS_URL}/{SCHOOL_1}")

        assert response.status_code == 204
        mock_repo.delete.assert_called_once()
        assert mock_repo.delete.call_args[0][1] == SCHOOL_1
