import os

# keep the app's import-time engine off the real bookings.db
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import Settings, get_settings
from database import Base, get_db
from main import app


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Admin@123"

# ------------------ engine ------------------
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def override_get_settings():
    return test_settings


test_settings = Settings(
    JWT_SECRET="test-secret",
    ADMIN_USERNAME=ADMIN_USERNAME,
    ADMIN_PASSWORD=ADMIN_PASSWORD,
    DATABASE_URL="sqlite://",
)


# ------------------ fixtures ------------------
@pytest.fixture
def settings():
    return test_settings


@pytest.fixture
def client():
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = override_get_settings

    yield TestClient(app)

    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/admin/login", json={
        "username": ADMIN_USERNAME,
        "password": ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def booking_payload():
    return {
        "name": "Ravi Kumar",
        "phone": "94637 33229",
        "service": "PPF",
        "date": (date.today() + timedelta(days=7)).isoformat(),
        "time": "10:30 AM",
        "note": "Black SUV",
    }
