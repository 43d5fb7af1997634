"""Test configuration for the FastAPI application."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from raceday.app import app
from raceday.config.settings import Settings
from raceday.models.events import SportEvent
from raceday.models.races import Race
from raceday.services.db.bootstrap import create_schema
from raceday.services.db.connector import close_connections, get_engine

NOW = datetime.now(UTC).replace(microsecond=0)

RACES = [
    dict(id=1, meeting_id=7, name="Flemington Race 1", number=1, visible=True,
         advertised_start_time=NOW - timedelta(hours=2)),
    dict(id=2, meeting_id=8, name="Randwick Race 2", number=2, visible=False,
         advertised_start_time=NOW + timedelta(hours=1)),
    dict(id=3, meeting_id=9, name="Caulfield Race 3", number=3, visible=True,
         advertised_start_time=NOW + timedelta(hours=3)),
    dict(id=4, meeting_id=1, name="Ascot Race 4", number=4, visible=True,
         advertised_start_time=NOW - timedelta(days=1)),
    dict(id=5, meeting_id=7, name="Ellerslie Race 5", number=5, visible=False,
         advertised_start_time=NOW + timedelta(days=1)),
]

EVENTS = [
    dict(id=1, name="Falcons vs Comets", visible=True,
         advertised_start_time=NOW - timedelta(hours=1)),
    dict(id=2, name="Rangers vs Wolves", visible=False,
         advertised_start_time=NOW + timedelta(hours=2)),
    dict(id=3, name="Titans vs Sharks", visible=True,
         advertised_start_time=NOW + timedelta(hours=5)),
]


@pytest.fixture
def database_path(tmp_path):
    """Create a catalog database populated with known races and events."""
    path = str(tmp_path / "raceday.db")
    engine = get_engine(path)
    create_schema(engine)
    with Session(engine) as session:
        session.add_all([Race(**race) for race in RACES])
        session.add_all([SportEvent(**event) for event in EVENTS])
        session.commit()
    yield path
    close_connections()


@pytest.fixture
def test_settings(database_path, monkeypatch):
    """Point the application at the test database."""
    settings = Settings(database_path=database_path, seed_demo_data=False)
    monkeypatch.setattr("raceday.config.settings.settings", settings)
    return settings


@pytest.fixture(scope="session")
def app_instance():
    """Create an application instance for testing."""
    return app


@pytest.fixture
def client(app_instance, test_settings):
    """Create a test client for the FastAPI application."""
    with TestClient(app_instance) as test_client:
        yield test_client
