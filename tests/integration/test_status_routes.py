"""
Integration tests for the status probes: /api/health, /api/twitch/status.
Outbound calls are served by httpx.MockTransport.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import app
from app.modules.status.routes import get_status_service
from app.modules.status.service import StatusService


@pytest.fixture
def probe_client():
    """Returns a factory: probe_client(handler, **settings) -> TestClient"""
    def make(handler, **overrides):
        values = {"supabase_url": "https://project.supabase.co/", "supabase_key": "anon-key"}
        values.update(overrides)
        service = StatusService(Settings(**values), transport=httpx.MockTransport(handler))
        app.dependency_overrides[get_status_service] = lambda: service
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


def not_called(request):
    raise AssertionError(f"unexpected request to {request.url}")


class TestHealth:

    def test_reachable(self, probe_client):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["apikey"] = request.headers.get("apikey")
            return httpx.Response(200, json={"name": "GoTrue"})

        response = probe_client(handler).get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert seen == {"url": "https://project.supabase.co/auth/v1/health", "apikey": "anon-key"}

    def test_missing_env(self, probe_client):
        response = probe_client(not_called, supabase_url="").get("/api/health")

        assert response.status_code == 500
        assert response.json() == {"ok": False, "missing_env": True}

    def test_bad_url(self, probe_client):
        response = probe_client(not_called, supabase_url="project.supabase.co").get("/api/health")

        assert response.status_code == 500
        assert response.json() == {"ok": False, "bad_url": True}

    def test_non_success_status(self, probe_client):
        response = probe_client(lambda request: httpx.Response(401, text="Invalid API key")).get("/api/health")

        assert response.status_code == 500
        assert response.json() == {"ok": False, "unreachable": True}

    def test_network_error_text_not_leaked(self, probe_client):
        def handler(request):
            raise httpx.ConnectError("secret dns failure", request=request)

        response = probe_client(handler).get("/api/health")

        assert response.status_code == 500
        assert response.json() == {"ok": False, "unreachable": True}
        assert "secret" not in response.text


class TestTwitchStatus:

    def test_live(self, probe_client):
        response = probe_client(lambda request: httpx.Response(200, text="2 hours, 5 minutes")).get("/api/twitch/status")

        assert response.status_code == 200
        assert response.json() == {"live": True}

    def test_offline(self, probe_client):
        response = probe_client(lambda request: httpx.Response(200, text="reggysosa is Offline")).get("/api/twitch/status")
        assert response.json() == {"live": False}

    def test_requests_configured_channel(self, probe_client):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, text="offline")

        probe_client(handler, twitch_channel="otherchannel").get("/api/twitch/status")

        assert seen == ["https://decapi.me/twitch/uptime/otherchannel"]

    def test_fetch_failure_is_offline(self, probe_client):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        response = probe_client(handler).get("/api/twitch/status")

        assert response.status_code == 200
        assert response.json() == {"live": False}
