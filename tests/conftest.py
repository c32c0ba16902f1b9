"""
Shared fixtures.

HTTP tests run against the real application with the database session,
the caller and the object store replaced through ``app.dependency_overrides``.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from schoolbase.core.auth import Principal, get_current_principal
from schoolbase.core.database import get_db
from schoolbase.core.roles import UserRole
from schoolbase.core.storage import get_object_store
from schoolbase.main import app
from tests.factories import (
    SCHOOL_1,
    FakeObjectStore,
    FakeStudentRepository,
    make_principal,
)


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.flush = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


@pytest.fixture
def super_admin():
    return make_principal(UserRole.SUPER_ADMIN)


@pytest.fixture
def school_admin():
    return make_principal(UserRole.SCHOOL_ADMIN, SCHOOL_1)


@pytest.fixture
def data_editor():
    return make_principal(UserRole.SCHOOL_DATA_EDITOR, SCHOOL_1)


@pytest.fixture
def parent():
    return make_principal(UserRole.PARENT, SCHOOL_1)


@pytest.fixture
def student_repo():
    """Patch the student service onto an in-memory repository."""
    repo = FakeStudentRepository()
    with patch("schoolbase.modules.students.service.StudentRepository", repo):
        yield repo


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def client(mock_db, object_store):
    """TestClient with the database and object store overridden."""

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_store] = lambda: object_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login():
    """Authenticate every request as the given principal."""

    def _login(principal: Principal) -> None:
        app.dependency_overrides[get_current_principal] = lambda: principal

    return _login
