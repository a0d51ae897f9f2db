import os
import time
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["MESSAGE_LOCALE"] = "tr"
os.environ["APP_TIMEZONE"] = "Europe/Istanbul"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from booking_app.database import Base, get_db  # noqa: E402
from booking_app.main import app  # noqa: E402
from booking_app.models import ServicePackage  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, _record):
        # Enforce references the way PostgreSQL does
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def package(session_factory):
    """An active 299.00 package"""
    with session_factory() as db:
        pkg = ServicePackage(name="Temel Danışmanlık", description="60 dk", price=299, duration=60)
        db.add(pkg)
        db.commit()
        db.refresh(pkg)
        db.expunge(pkg)
        return pkg


@pytest.fixture
def customer_payload():
    return {
        "firstName": "Ayşe",
        "lastName": "Yılmaz",
        "email": "ayse@example.com",
        "phone": "+90 532 123 45 67",
    }


@pytest.fixture
def customer(client, customer_payload):
    response = client.post("/api/customers", json=customer_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def host_timezone(monkeypatch):
    """Run with the process clock set far from the business timezone"""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Pacific/Honolulu")
    time.tzset()
    yield "Pacific/Honolulu"
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def assert_business_now():
    """Check that an ISO timestamp is within a few minutes of Istanbul wall-clock time"""

    def check(value: str):
        expected = datetime.now(ZoneInfo("Europe/Istanbul")).replace(tzinfo=None)
        assert abs(datetime.fromisoformat(value) - expected) < timedelta(minutes=5)

    return check
