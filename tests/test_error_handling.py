# /tests/test_error_handling.py

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.main import app
from app.services.database_helpers.student_repository_sql import StudentRepositorySQL

STORAGE_FAILURE = "disk I/O error on /var/lib/school/students.db"


@pytest.fixture
def failing_client(client, monkeypatch):
    """A client whose student list query fails inside the storage layer."""
    def broken_query(self, *args, **kwargs):
        raise OperationalError("SELECT * FROM students", {}, Exception(STORAGE_FAILURE))

    monkeypatch.setattr(StudentRepositorySQL, "get_all_students", broken_query)
    return TestClient(app, raise_server_exceptions=False)


def test_unexpected_storage_failure_returns_generic_internal_error(failing_client, seed, as_admin, caplog):
    """
    GIVEN a storage failure while listing students
    WHEN the list is requested
    THEN the caller gets a generic 500 and the cause only reaches the server log.
    """
    with caplog.at_level(logging.ERROR):
        response = failing_client.get("/api/students", headers=as_admin)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "category": "internal"}
    assert STORAGE_FAILURE not in response.text
    assert "students" not in response.text
    assert STORAGE_FAILURE in caplog.text


def test_expected_errors_are_not_logged_as_internal(client, seed, as_lincoln, caplog):
    with caplog.at_level(logging.ERROR):
        response = client.get("/api/students/99999", headers=as_lincoln)

    assert response.status_code == 404
    assert "Unhandled error" not in caplog.text
