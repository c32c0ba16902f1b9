"""
HTTP tests for the files endpoints.
"""

import re
from unittest.mock import MagicMock, patch

from schoolbase.core.errors import StorageError
from schoolbase.core.roles import UserRole
from schoolbase.modules.files.router import UPLOADERS
from tests.factories import SCHOOL_1, SCHOOL_2, make_principal

UPLOAD_URL = "/api/v1/files/upload-url"
PUBLIC_URL = "/api/v1/files/public-url"


class TestUploadUrl:
    def test_teacher_gets_path_in_own_school(self, client, login):
        login(make_principal(UserRole.TEACHER, SCHOOL_1))

        response = client.post(
            UPLOAD_URL,
            json={"fileType": "profile_photos", "originalFileName": "photo.png"},
        )

        assert response.status_code == 200
        body = response.json()
        assert re.fullmatch(
            rf"school_uploads/{SCHOOL_1}/profile_photos/[0-9a-f-]{{36}}\.png", body["fullPath"]
        )
        assert body["signedUrl"].startswith("https://storage.test/upload/")

    def test_name_without_extension(self, client, login):
        login(make_principal(UserRole.TEACHER, SCHOOL_1))

        response = client.post(
            UPLOAD_URL,
            json={"fileType": "profile_photos", "originalFileName": "photo"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    def test_unknown_category(self, client, login):
        login(make_principal(UserRole.TEACHER, SCHOOL_1))

        response = client.post(
            UPLOAD_URL,
            json={"fileType": "selfies", "originalFileName": "photo.png"},
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["path"] == "fileType"

    def test_school_user_cannot_target_other_school(self, client, login):
        login(make_principal(UserRole.PARENT, SCHOOL_1))

        response = client.post(
            UPLOAD_URL,
            json={
                "fileType": "student_documents",
                "originalFileName": "report.pdf",
                "schoolId": SCHOOL_2,
            },
        )

        assert response.status_code == 403
        assert response.json()["code"] == "TENANT_MISMATCH"

    def test_platform_role_names_school(self, client, login, super_admin):
        login(super_admin)

        response = client.post(
            UPLOAD_URL,
            json={
                "fileType": "certificates",
                "originalFileName": "award.pdf",
                "schoolId": SCHOOL_2,
            },
        )

        assert response.status_code == 200
        assert response.json()["fullPath"].startswith(f"school_uploads/{SCHOOL_2}/certificates/")

    def test_platform_school_id_is_canonicalized(self, client, login, super_admin):
        login(super_admin)

        response = client.post(
            UPLOAD_URL,
            json={
                "fileType": "reports",
                "originalFileName": "term1.pdf",
                "schoolId": SCHOOL_2.upper(),
            },
        )

        assert response.status_code == 200
        assert response.json()["fullPath"].startswith(f"school_uploads/{SCHOOL_2}/reports/")

    def test_platform_malformed_school_id(self, client, login, super_admin, object_store):
        login(super_admin)

        response = client.post(
            UPLOAD_URL,
            json={
                "fileType": "reports",
                "originalFileName": "term1.pdf",
                "schoolId": "../../avatars",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_FAILED"
        assert body["details"][0]["path"] == "schoolId"
        object_store.create_signed_upload_url.assert_not_called()

    def test_snake_case_school_id_is_ignored(self, client, login, parent):
        login(parent)

        response = client.post(
            UPLOAD_URL,
            json={
                "fileType": "student_documents",
                "originalFileName": "report.pdf",
                "school_id": SCHOOL_2,
            },
        )

        assert response.status_code == 200
        assert response.json()["fullPath"].startswith(f"school_uploads/{SCHOOL_1}/")

    def test_platform_role_without_school(self, client, login, super_admin):
        login(super_admin)

        response = client.post(
            UPLOAD_URL,
            json={"fileType": "certificates", "originalFileName": "award.pdf"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "TENANT_REQUIRED"

    def test_finance_manager_cannot_upload(self, client, login):
        assert UserRole.SCHOOL_FINANCE_MANAGER not in UPLOADERS
        login(make_principal(UserRole.SCHOOL_FINANCE_MANAGER, SCHOOL_1))

        response = client.post(
            UPLOAD_URL,
            json={"fileType": "reports", "originalFileName": "q1.xlsx"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "ROLE_FORBIDDEN"


class TestPublicUrl:
    def test_returns_url(self, client, login):
        login(make_principal(UserRole.STUDENT_USER, SCHOOL_1))

        response = client.get(PUBLIC_URL, params={"filePath": "school_uploads/a/b.png"})

        assert response.status_code == 200
        assert response.json() == {"publicUrl": "https://storage.test/public/file.png"}

    def test_missing_path(self, client, login):
        login(make_principal(UserRole.STUDENT_USER, SCHOOL_1))

        response = client.get(PUBLIC_URL)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"

    def test_empty_url(self, client, login, object_store):
        object_store.public_url = ""
        login(make_principal(UserRole.TEACHER, SCHOOL_1))

        response = client.get(PUBLIC_URL, params={"filePath": "school_uploads/a/missing.png"})

        assert response.status_code == 404
        assert response.json()["code"] == "FILE_NOT_FOUND"


class TestStorageFailure:
    def test_store_error_is_500(self, client, login, object_store):
        object_store.create_signed_upload_url.side_effect = StorageError(
            "Failed to generate signed upload URL.", details="bucket not found"
        )
        login(make_principal(UserRole.TEACHER, SCHOOL_1))

        response = client.post(
            UPLOAD_URL,
            json={"fileType": "profile_photos", "originalFileName": "photo.png"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to generate signed upload URL.",
            "statusCode": 500,
            "code": "STORAGE_UPLOAD_ERROR",
            "details": "bucket not found",
        }

    def test_store_error_masked_in_production(self, client, login, object_store):
        object_store.create_signed_upload_url.side_effect = StorageError(
            "Failed to generate signed upload URL.", details="bucket not found"
        )
        login(make_principal(UserRole.TEACHER, SCHOOL_1))

        with patch("schoolbase.core.errors.settings", MagicMock(is_production=True)):
            response = client.post(
                UPLOAD_URL,
                json={"fileType": "profile_photos", "originalFileName": "photo.png"},
            )

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "STORAGE_UPLOAD_ERROR"
        assert body["message"] == "An internal server error occurred."
        assert body["details"] is None
