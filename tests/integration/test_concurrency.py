"""
Integration tests for request independence: a slow store call must not hold
up other requests.
"""
import asyncio
import time

import httpx

from app.database.supabase_client import get_supabase
from app.main import app
from tests.fakes import FakeSupabase

STORE_DELAY = 0.4


class SlowSupabase(FakeSupabase):
    """Fake store whose every query blocks the calling thread."""

    def table(self, name):
        time.sleep(STORE_DELAY)
        return super().table(name)


async def timed_gather(paths):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        start = time.monotonic()
        responses = await asyncio.gather(*[client.get(path) for path in paths])
        return time.monotonic() - start, responses


class TestConcurrentRequests:

    def test_store_calls_run_in_parallel(self):
        app.dependency_overrides[get_supabase] = lambda: SlowSupabase()
        try:
            elapsed, responses = asyncio.run(timed_gather(["/api/teams"] * 4))
        finally:
            app.dependency_overrides.clear()

        assert [r.status_code for r in responses] == [200] * 4
        # Serialized handling would take 4 * STORE_DELAY
        assert elapsed < 3 * STORE_DELAY

    def test_slow_store_does_not_block_ready(self):
        app.dependency_overrides[get_supabase] = lambda: SlowSupabase()
        try:
            elapsed, responses = asyncio.run(
                timed_gather(["/api/teams", "/api/tournaments", "/ready"])
            )
        finally:
            app.dependency_overrides.clear()

        assert [r.status_code for r in responses] == [200, 200, 200]
        assert elapsed < 2 * STORE_DELAY
