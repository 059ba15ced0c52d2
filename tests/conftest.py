import os

# Must be set before jobtrack.config is imported
os.environ.setdefault("JOBTRACK_DATABASE_URL", "sqlite://")
os.environ.setdefault("JOBTRACK_SECRET_KEY", "test-secret-key")
os.environ.setdefault("JOBTRACK_BCRYPT_ROUNDS", "4")
os.environ.setdefault("JOBTRACK_CREATE_TABLES_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from jobtrack.database import Base, create_app_engine, get_db, init_db
from jobtrack.main import app


@pytest.fixture()
def db_engine():
    engine = create_app_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def api(session_factory):
    """The FastAPI app wired to a fresh in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def client(api):
    return TestClient(api)


def register(client, email="a@example.com", password="pw123", name=None):
    payload = {"email": email, "password": password}
    if name is not None:
        payload["name"] = name
    return client.post("/auth/register", json=payload)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def alice(client):
    response = register(client, "alice@example.com", "alice-pw", "Alice")
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def bob(client):
    response = register(client, "bob@example.com", "bob-pw")
    assert response.status_code == 201
    return response.json()
