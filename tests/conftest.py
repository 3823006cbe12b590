# /tests/conftest.py

import os

# Settings are read at import time; these must be in place before `app` loads.
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-suite")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import security
from app.db.base import Base, School, Monitor
from app.db.database import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models.auth_model import Principal, Role
from app.services.database_service import DatabaseService

TEST_ITERATIONS = 1000


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test, shared across threads."""
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
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def seed(db_session):
    """
    Two schools and three accounts:
    an administrator, a monitor at Lincoln and a monitor at Roosevelt.
    """
    lincoln = School(name="Lincoln")
    roosevelt = School(name="Roosevelt")
    db_session.add_all([lincoln, roosevelt])
    db_session.commit()

    admin = Monitor(name="Admin", national_id="000", role="admin", school_id=None,
                    password_hash=security.hash_password("admin-pass", iterations=TEST_ITERATIONS))
    lincoln_monitor = Monitor(name="Lara", national_id="111", role="monitor", school_id=lincoln.id,
                              password_hash=security.hash_password("lara-pass", iterations=TEST_ITERATIONS))
    roosevelt_monitor = Monitor(name="Rui", national_id="222", role="monitor", school_id=roosevelt.id,
                                password_hash=security.hash_password("rui-pass", iterations=TEST_ITERATIONS))
    db_session.add_all([admin, lincoln_monitor, roosevelt_monitor])
    db_session.commit()

    return {
        "lincoln_id": lincoln.id,
        "roosevelt_id": roosevelt.id,
        "admin": Principal(id=admin.id, name=admin.name, role=Role.ADMIN, school_id=None),
        "lincoln_monitor": Principal(id=lincoln_monitor.id, name=lincoln_monitor.name,
                                     role=Role.MONITOR, school_id=lincoln.id),
        "roosevelt_monitor": Principal(id=roosevelt_monitor.id, name=roosevelt_monitor.name,
                                       role=Role.MONITOR, school_id=roosevelt.id),
    }


@pytest.fixture
def client(session_factory):
    """A TestClient whose requests each get their own session on the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with_client = TestClient(app)
    yield with_client
    app.dependency_overrides.clear()


def auth_headers(principal: Principal) -> dict:
    return {"Authorization": f"Bearer {security.create_access_token(principal)}"}


@pytest.fixture
def as_admin(seed):
    return auth_headers(seed["admin"])


@pytest.fixture
def as_lincoln(seed):
    return auth_headers(seed["lincoln_monitor"])


@pytest.fixture
def as_roosevelt(seed):
    return auth_headers(seed["roosevelt_monitor"])
