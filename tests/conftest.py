import os

# must be set before student_service is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STUDENT_STORE", "sql")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from student_service.database import build_engine, create_db_and_tables, get_session
from student_service.main import app, get_student_repository
from student_service.repositories import InMemoryStudentRepository


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test."""
    eng = build_engine("sqlite://")
    create_db_and_tables(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def memory_repository():
    return InMemoryStudentRepository()


@pytest.fixture
def memory_client(memory_repository):
    app.dependency_overrides[get_student_repository] = lambda: memory_repository
    yield TestClient(app)
    app.dependency_overrides.clear()
