"""
Tests for error normalization.

Every failure leaves the API as {message, statusCode, code, details}.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from schoolbase.core.errors import (
    GENERIC_SERVER_ERROR_MESSAGE,
    NotFoundError,
    StoreError,
    error_envelope,
    format_validation_errors,
    register_exception_handlers,
    store_errors,
)


@pytest.fixture
def error_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("student", "Student not found or not associated with this school.")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("connection reset by peer")

    @app.get("/teapot")
    async def teapot():
        raise HTTPException(status_code=418, detail="I'm a teapot")

    @app.get("/store")
    async def store():
        raise StoreError("Failed to create school.", "SCHOOL_CREATION_ERROR", "duplicate key")

    return TestClient(app, raise_server_exceptions=False)


class TestErrorEnvelope:
    def test_envelope_shape(self):
        assert error_envelope("Nope", 403, "ROLE_FORBIDDEN") == {
            "message": "Nope",
            "statusCode": 403,
            "code": "ROLE_FORBIDDEN",
            "details": None,
        }

    def test_production_masks_server_errors(self):
        with patch("schoolbase.core.errors.settings", MagicMock(is_production=True)):
            body = error_envelope("db exploded", 500, "SCHOOL_FETCH_ERROR", "relation missing")

        assert body["message"] == GENERIC_SERVER_ERROR_MESSAGE
        assert body["details"] is None
        assert body["code"] == "SCHOOL_FETCH_ERROR"

    def test_production_keeps_client_errors(self):
        details = [{"path": "name", "message": "Field required"}]
        with patch("schoolbase.core.errors.settings", MagicMock(is_production=True)):
            body = error_envelope("Validation failed", 400, "VALIDATION_FAILED", details)

        assert body["message"] == "Validation failed"
        assert body["details"] == details


class TestHandlers:
    def test_app_error(self, error_app):
        response = error_app.get("/not-found")

        assert response.status_code == 404
        assert response.json() == {
            "message": "Student not found or not associated with this school.",
            "statusCode": 404,
            "code": "STUDENT_NOT_FOUND",
            "details": None,
        }

    def test_unhandled_exception(self, error_app):
        response = error_app.get("/crash")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "SERVER_ERROR"
        assert body["statusCode"] == 500

    def test_http_exception(self, error_app):
        response = error_app.get("/teapot")

        assert response.status_code == 418
        assert response.json()["code"] == "HTTP_418"

    def test_unknown_route(self, error_app):
        response = error_app.get("/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_404"

    def test_store_error_keeps_driver_details(self, error_app):
        response = error_app.get("/store")

        assert response.status_code == 500
        assert response.json()["details"] == "duplicate key"


class TestStoreErrors:
    def test_translates_sqlalchemy_errors(self):
        orig = Exception('duplicate key value violates unique constraint "ix_schools_subdomain"')

        with pytest.raises(StoreError) as exc_info:
            with store_errors("Failed to create school.", "SCHOOL_CREATION_ERROR"):
                raise IntegrityError("INSERT INTO schools", {}, orig)

        assert exc_info.value.code == "SCHOOL_CREATION_ERROR"
        assert exc_info.value.status_code == 500
        assert "ix_schools_subdomain" in exc_info.value.details

    def test_other_errors_pass_through(self):
        with pytest.raises(ValueError):
            with store_errors("Failed to create school.", "SCHOOL_CREATION_ERROR"):
                raise ValueError("not a store failure")


class TestFormatValidationErrors:
    def test_drops_request_location(self):
        errors = [
            {"loc": ("body", "first_name"), "msg": "Field required"},
            {"loc": ("body", "allergies", 0), "msg": "String should have at least 1 character"},
            {"loc": ("query", "file_path"), "msg": "Field required"},
        ]

        assert format_validation_errors(errors) == [
            {"path": "first_name", "message": "Field required"},
            {"path": "allergies.0", "message": "String should have at least 1 character"},
            {"path": "file_path", "message": "Field required"},
        ]
