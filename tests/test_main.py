import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from airwatch.core.database import check_connection, get_db
from airwatch.crud import readings
from airwatch.main import app


@pytest.fixture
def broken_client(tmp_path):
    # the parent directory does not exist, so every connect fails
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'store.db'}")
    BrokenSession = sessionmaker(bind=engine)

    def override_get_db():
        db = BrokenSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()


def test_root(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.json() == {"status": "AirWatch backend running"}


def test_unknown_route_uses_error_shape(client):
    res = client.get("/nope")

    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


@pytest.mark.parametrize("method,path,kwargs", [
    ("GET", "/check-device", {"params": {"mac_address": "AA"}}),
    ("GET", "/get-devices", {"params": {"userEmail": "a@example.com"}}),
    ("GET", "/profile-data", {"params": {"email": "a@example.com"}}),
    ("POST", "/login", {"json": {"email": "a@example.com", "password": "Secret123"}}),
])
def test_store_fault_is_generic_500(broken_client, method, path, kwargs):
    res = broken_client.request(method, path, **kwargs)

    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


def test_cors_headers(client):
    res = client.get("/", headers={"Origin": "http://dashboard.local"})

    assert res.headers["access-control-allow-origin"] == "*"


def test_check_connection(engine, tmp_path):
    broken = create_engine(f"sqlite:///{tmp_path / 'missing' / 'store.db'}")

    assert check_connection(engine) is True
    assert check_connection(broken) is False
    broken.dispose()


def test_unexpected_error_keeps_error_shape(session_factory, monkeypatch):
    def fail(db, mac_address):
        raise RuntimeError("boom")

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    monkeypatch.setattr(readings, "mac_has_readings", fail)
    app.dependency_overrides[get_db] = override_get_db
    try:
        res = TestClient(app, raise_server_exceptions=False).get(
            "/check-device", params={"mac_address": "AA"}
        )
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
