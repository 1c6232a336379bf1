"""
Pytest configuration and fixtures.
"""

import os
from contextlib import contextmanager

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

# Set test environment - use a SQLite file database for tests
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["ADMIN_API_KEY"] = "test-admin-key"
os.environ["SITE_URL"] = "https://rides.example.org"
os.environ["EMAIL_FROM_NAME"] = "Travel Assistant"
os.environ["EMAIL_FROM_ADDRESS"] = "rides@example.org"
os.environ.pop("MANDRILL_API_KEY", None)
os.environ.pop("SMTP_HOST", None)

from travel_assistant.core.models.base import Base
from travel_assistant.core.database import get_db
from travel_assistant.api.main import create_app

# Import all models to register them with Base.metadata
from travel_assistant.core.models.state import State
from travel_assistant.core.models.city import City
from travel_assistant.core.models.ride import RideNeed, RideShare
from travel_assistant.core.models.plugin_settings import PluginSettings

from travel_assistant.directory import Region
from travel_assistant.directory.seed_data import US_STATES

TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session")
def db_engine():
    """Create test database engine."""
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    # Clean up test database file
    if os.path.exists("./test.db"):
        os.remove("./test.db")


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a new database session for each test."""
    connection = db_engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create test client with database override."""
    app = create_app()

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    """Headers for admin API authentication."""
    return {"X-API-Key": "test-admin-key"}


@pytest.fixture
def us_regions():
    """The 50 states and DC as directory regions."""
    return [
        Region(code=row["code"], name=row["name"], is_district=row.get("district", False))
        for row in US_STATES
    ]


@pytest.fixture
def seeded_states(db_session):
    """Insert the 50 states and DC."""
    for row in US_STATES:
        db_session.add(State(
            code=row["code"],
            name=row["name"],
            district=row.get("district", False),
        ))
    db_session.commit()
    return db_session


@pytest.fixture
def cli_db(db_session, monkeypatch):
    """Route the CLI's database sessions to the test session."""
    @contextmanager
    def session_scope():
        yield db_session
        db_session.commit()

    monkeypatch.setattr("travel_assistant.cli.db.get_db_session", session_scope)
    monkeypatch.setattr("travel_assistant.cli.states.get_db_session", session_scope)
    return db_session
