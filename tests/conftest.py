"""
Pytest configuration and fixtures for the tournament gateway tests.
"""
import os

import pytest

# Set testing environment before importing app
os.environ["SUPABASE_URL"] = "https://project.supabase.co"
os.environ["SUPABASE_KEY"] = "test-anon-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from fastapi.testclient import TestClient

from app.database.supabase_client import get_supabase
from app.main import app
from tests.fakes import FakeSupabase


@pytest.fixture
def fake_supabase():
    """Empty in-memory store."""
    return FakeSupabase()


@pytest.fixture
def client(fake_supabase):
    """Test client whose routes talk to the in-memory store."""
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(monkeypatch):
    """Test client with no Supabase settings in the environment."""
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "NEXT_PUBLIC_SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_ANON_KEY"):
        monkeypatch.delenv(name, raising=False)
    app.dependency_overrides.clear()
    return TestClient(app)


@pytest.fixture
def sample_team(fake_supabase):
    team = {
        "id": "team-1",
        "name": "Raptors",
        "captain": "Reggy",
        "members": ["Reggy"],
        "invites": ["old@example.com"],
        "created_at": "2026-01-01T00:00:00Z",
    }
    fake_supabase.tables["teams"] = [dict(team)]
    return team


@pytest.fixture
def sample_tournament(fake_supabase):
    tournament = {
        "id": "abc",
        "name": "Spring Cup",
        "max_teams": 8,
        "start_date": "2026-05-01",
        "status": "open",
        "winner": None,
        "bracket": None,
        "created_at": "2026-01-01T00:00:00Z",
    }
    fake_supabase.tables["tournaments"] = [dict(tournament)]
    return tournament
