"""
Pytest configuration and fixtures for fleet tests.

Tests run against an in-memory SQLite database; tables are recreated for
every test.
"""

import os

# Set environment variables for testing BEFORE any imports
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from fleet.core.database import Base, SessionLocal, engine, init_db
from fleet.core.gateway import TableGateway
from fleet.main import app
from fleet.repositories import (
    CalendarRepository,
    HistoryRepository,
    MaintenanceRepository,
    ReportRepository,
    UserRepository,
    VehicleRepository,
)


class FakeClock:
    """Returns a strictly increasing ISO timestamp on every call."""

    def __init__(self, start: datetime = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> str:
        self.current += timedelta(seconds=1)
        return self.current.isoformat()


@pytest.fixture(autouse=True)
def fresh_tables():
    """Recreate all tables around each test."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gateway(db, clock):
    return TableGateway(db, clock=clock)


@pytest.fixture
def history(gateway):
    return HistoryRepository(gateway)


@pytest.fixture
def vehicles(gateway, history):
    return VehicleRepository(gateway, history, performed_by="tester")


@pytest.fixture
def maintenance(gateway, history):
    return MaintenanceRepository(gateway, history, performed_by="tester")


@pytest.fixture
def reports(gateway, history):
    return ReportRepository(gateway, history)


@pytest.fixture
def calendar(gateway, history):
    return CalendarRepository(gateway, history)


@pytest.fixture
def users(gateway):
    return UserRepository(gateway)


@pytest.fixture
def api():
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_vehicle():
    return {
        "licensePlate": "FLT-001",
        "model": "Transit",
        "make": "Ford",
        "year": 2021,
        "vin": "1FTBW3XM5MKA00001",
        "barcode": "BC-001",
        "mileage": 42000,
    }


@pytest.fixture
def sample_record():
    return {
        "serviceType": "oil_change",
        "date": "2024-05-10",
        "cost": 120.5,
        "mechanic": "Dana",
        "tasks": [{"id": "t1", "description": "Drain oil", "completed": False}],
    }
