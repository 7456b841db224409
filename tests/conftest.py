import os

# keep the module-level engine away from MySQL during tests
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from airwatch.core.database import create_tables, get_db
from airwatch.main import app
from airwatch.models.sensor_data import SensorReading

STRONG_PASSWORD = "Secret123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    def _register(
        email="alice@example.com",
        username="alice",
        phone="5550001",
        password=STRONG_PASSWORD,
        name="Alice",
    ):
        return client.post("/register", json={
            "name": name,
            "username": username,
            "password": password,
            "email": email,
            "phoneNumber": phone,
        })
    return _register


@pytest.fixture
def add_reading(db_session):
    def _add(mac_address, timestamp, **fields):
        reading = SensorReading(
            mac_address=mac_address,
            timestamp=timestamp if isinstance(timestamp, datetime) else datetime.fromisoformat(timestamp),
            **fields,
        )
        db_session.add(reading)
        db_session.commit()
        return reading
    return _add
