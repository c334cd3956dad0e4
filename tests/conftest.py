"""
Apartment Booking API — Test Configuration (conftest.py)

Service tests use the in-memory repositories from fakes.py. API tests run the
FastAPI app against an in-memory SQLite database rebuilt for every test.
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["TIMEZONE"] = "UTC"
os.environ["PAYMENT_SUCCESS_RATE"] = "1.0"
os.environ["DEFAULT_ADMIN_EMAIL"] = "admin@example.com"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin123"

import pytest
from fastapi.testclient import TestClient

from booking_api.infrastructure.database import Base, engine
from booking_api.interfaces.deps import get_payment_gateway
from booking_api.main import app

from fakes import StubGateway
from helpers import auth_headers

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def client():
    """HTTP client over a fresh schema; the lifespan seeds the admin account."""
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def gateway():
    """Deterministic payment gateway wired into the app."""
    stub = StubGateway(success=True)
    app.dependency_overrides[get_payment_gateway] = lambda: stub
    return stub


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return auth_headers(response.json()["access_token"])


@pytest.fixture
def register(client):
    """Register a user and return (headers, user id)."""

    def _register(name: str = "Alice", email: str = "alice@example.com", password: str = "secret123"):
        response = client.post(
            "/api/auth/register", json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return auth_headers(body["access_token"]), body["user"]["id"]

    return _register


@pytest.fixture
def user_headers(register):
    headers, _ = register()
    return headers


@pytest.fixture
def apartment(client, admin_headers):
    response = client.post(
        "/api/apartments",
        json={
            "title": "Luxury Downtown Apartment",
            "description": "Beautiful apartment in the heart of the city.",
            "location": "Downtown",
            "category": "Luxury",
            "price": 150.0,
            "capacity": 4,
            "amenities": "WiFi, Kitchen",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
