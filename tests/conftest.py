# /tests/conftest.py

"""
Shared fixtures: a fresh in-memory SQLite schema per test, a DatabaseService
bound to it, a few ready-made people and an HTTP client whose requests use
the same session.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portal.core import security
from portal.db.base import Base
from portal.db.database import enable_sqlite_foreign_keys, get_db
from portal.main import app
from portal.models.content_model import AssignmentCreate, QuizCreate, ProjectCreate, ContentKind
from portal.services import auth_service, content_service
from portal.services.database_service import DatabaseService


@pytest.fixture
def engine():
    # StaticPool keeps the single in-memory database alive across connections.
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_service(session):
    return DatabaseService(db_session=session)


# --- People ---

@pytest.fixture
def admin(db_service):
    return auth_service.sign_up(db_service, "admin@portal.test", "admin-pass", "Ada Admin", "admin")


@pytest.fixture
def student_p1(db_service):
    return auth_service.sign_up(db_service, "s1@portal.test", "secret1", "Sam Phaseone", "student", phase="phase1")


@pytest.fixture
def student_p2(db_service):
    return auth_service.sign_up(db_service, "s2@portal.test", "secret2", "Pat Phasetwo", "student", phase="phase2")


# --- Content ---

@pytest.fixture
def make_item(db_service, admin):
    """Factory that publishes an item of any kind for a given audience."""
    create_models = {
        ContentKind.ASSIGNMENT: AssignmentCreate,
        ContentKind.QUIZ: QuizCreate,
        ContentKind.PROJECT: ProjectCreate,
    }

    def _make(kind=ContentKind.ASSIGNMENT, target_phase="both", title="Item"):
        item_in = create_models[kind](title=title, description=f"{title} description", target_phase=target_phase)
        return content_service.create_item(kind, item_in, admin.id, db_service)

    return _make


# --- HTTP ---

@pytest.fixture
def client(session):
    def _override_get_db():
        yield session

    app.dependency_overrides[get_db] = _override_get_db
    # No `with` block: the lifespan (which creates the real database) is not run.
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(profile) -> dict:
    return {"Authorization": f"Bearer {security.create_access_token(subject=profile.id)}"}


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def p1_headers(student_p1):
    return auth_headers(student_p1)


@pytest.fixture
def p2_headers(student_p2):
    return auth_headers(student_p2)
