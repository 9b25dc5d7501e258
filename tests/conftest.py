from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ecotrack.dependencies import get_now, get_store
from ecotrack.main import app
from ecotrack.models.activity_schema import Activity, ActivityCategory
from ecotrack.services.store import InMemoryStore

# Wednesday; the week runs Monday 2024-07-22 to Sunday 2024-07-28
NOW = datetime(2024, 7, 24, 12, 0)
USER = "user-123"


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Test client bound to a fresh store and a frozen clock."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_now] = lambda: NOW
    yield TestClient(app, headers={"X-User-Id": USER})
    app.dependency_overrides.clear()


def make_activity(when, category, co2e, description="test activity", **attributes):
    return Activity(
        id=f"{category}-{when.isoformat()}-{co2e}",
        date=when,
        category=ActivityCategory(category),
        description=description,
        co2e=co2e,
        attributes=attributes,
    )
