"""
Shared fixtures: a fresh in-memory SQLite database per test with get_db overridden.
"""
import os
import tempfile

# Must be set before staybook settings are imported
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="staybook-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import staybook.models  # noqa: F401
from staybook.db.base import Base
from staybook.db.session import get_db
from staybook.main import app


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    # See https://fastapi.tiangolo.com/advanced/testing-database
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestingSessionLocal
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def make_client(session_factory):
    """Each client keeps its own cookie jar, i.e. its own session."""
    def _make_client(**kwargs):
        return TestClient(app, **kwargs)
    return _make_client


@pytest.fixture()
def client(make_client):
    return make_client()


@pytest.fixture()
def signup():
    """Register a user through the API and log the given client in."""
    def _signup(client, name, email, password="testpassword123"):
        response = client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201
        response = client.post(
            "/api/login",
            json={"email": email, "password": password}
        )
        assert response.status_code == 200
        return response.json()["user"]
    return _signup
