import pytest
from fastapi.testclient import TestClient

from src.auth.service import IdentityService
from src.auth.session import MemorySessionStore
from src.bookings.booking_service import BookingService
from src.database import InMemoryStore
from src.main import create_app
from src.travel.service import TravelService


@pytest.fixture
def db():
    return InMemoryStore(latency_scale=0)


@pytest.fixture
def booking_service(db):
    return BookingService(db)


@pytest.fixture
def travel_service(db):
    return TravelService(db)


@pytest.fixture
def session():
    return MemorySessionStore()


@pytest.fixture
def identity(db, session):
    return IdentityService(db, session)


@pytest.fixture
def client(db):
    with TestClient(create_app(db)) as client:
        yield client


@pytest.fixture
def logged_in_client(client):
    response = client.post("/api/v1/auth/login", json={"username": "user123"})
    assert response.status_code == 200
    return client
