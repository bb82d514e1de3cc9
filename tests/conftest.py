"""
Pytest configuration and shared fixtures.
"""

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from faker import Faker

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def sample_attributes():
    """Widget attributes for a timed event in Pacific daylight time."""
    return {
        "title": "Tahoe Trail Run",
        "start": "2026-07-04T06:30:00",
        "end": "2026-07-04T12:00:00",
        "location": "Tahoe City, CA",
        "description": "Meet at the trailhead.\nBring water.",
    }


@pytest.fixture
def all_day_attributes():
    """Widget attributes for a multi-day all-day event in Pacific standard time."""
    return {
        "title": "Trip",
        "start": "2026-02-12",
        "end": "2026-02-16",
        "location": "Death Valley",
        "description": "Four nights of camping",
    }


@pytest.fixture
def fixed_now():
    """Deterministic 'current instant' for DTSTAMP/UID."""
    return datetime(2026, 1, 15, 18, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def fake():
    """Seeded Faker for free-text fields."""
    Faker.seed(2026)
    return Faker()


@pytest.fixture
def request_db(tmp_path, monkeypatch):
    """Point the API request log at a fresh temporary database."""
    import api.logging
    import api.routes.health
    from core.database import create_tables, get_connection

    db_path = tmp_path / "requests.db"
    conn = get_connection(db_path)
    try:
        create_tables(conn)
    finally:
        conn.close()

    monkeypatch.setattr(api.logging, "DB_PATH", db_path)
    monkeypatch.setattr(api.routes.health, "DB_PATH", db_path)
    return db_path


@pytest.fixture
def client(request_db):
    """FastAPI test client with request logging to a temp database."""
    from fastapi.testclient import TestClient

    from api.main import app

    with TestClient(app) as test_client:
        yield test_client
