"""Shared fixtures for the roster API tests."""

import os

# Must be set before the settings module is imported.
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from devops_class_api.app.main import create_app  # noqa: E402
from devops_class_api.app.services.roster_service import RosterService  # noqa: E402


SEEDED_STUDENTS = [
    {"classId": 1, "name": "Celestine Ugwu", "gender": "male"},
    {"classId": 2, "name": "Abel", "gender": "male"},
    {"classId": 3, "name": "Fred Kanwai", "gender": "male"},
    {"classId": 4, "name": "Abdulqoyum Adeola Ilori", "gender": "male"},
]


@pytest.fixture
def seeded():
    """The four records every new roster starts with."""
    return [dict(s) for s in SEEDED_STUDENTS]


@pytest.fixture
def roster():
    """A freshly seeded roster service."""
    return RosterService()


@pytest.fixture
def app(roster):
    return create_app(roster=roster)


@pytest.fixture
def client(app):
    """Create a test client bound to an isolated application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def new_student():
    """A valid student payload."""
    return {"classId": 5, "name": "New Student", "gender": "female"}
