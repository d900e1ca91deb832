"""
Shared test fixtures.

Settings come from environment variables, so the test values are set before
anything from app is imported.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.database import Base, create_db_engine, get_db
from app.main import app
from app.services.user_service import UserService

TEST_SECRET_KEY = "test-secret-key-for-testing-only"
EMAIL = "a@x.com"
PASSWORD = "secret"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    # Lowest bcrypt cost keeps hashing fast in tests
    return Settings(
        SECRET_KEY=TEST_SECRET_KEY,
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        _env_file=None,
    )


@pytest.fixture
def engine():
    # One shared in-memory connection so every session sees the same tables
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user_service(db_session, settings) -> UserService:
    return UserService(db_session, settings)


@pytest.fixture
def client(session_factory, settings):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client) -> dict:
    """Register EMAIL/PASSWORD through the API and return the response body"""
    response = client.post("/api/auth/register", json={"email": EMAIL, "password": PASSWORD})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict[str, str]:
    return {"Authorization": f"Bearer {registered_user['token']}"}
