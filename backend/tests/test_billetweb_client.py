"""Billetweb client: requests sent and failure handling."""
import asyncio

import httpx
import pytest

from boxoffice.core.errors import UpstreamError, UpstreamFetchError
from boxoffice.services.billetweb import BilletwebClient


class TestFetchSnapshot:
    """Three concurrent GETs joined into one snapshot."""

    @pytest.mark.asyncio
    async def test_returns_all_three_arrays(self, make_client, dates, tickets, avail):
        snapshot = await make_client().fetch_snapshot()
        assert snapshot.dates == dates
        assert snapshot.tickets == tickets
        assert snapshot.avail == avail

    @pytest.mark.asyncio
    async def test_each_request_carries_credentials_and_version(self, make_client):
        """user, key and version=1 on every call; one call per resource."""
        seen = []
        await make_client(seen=seen).fetch_snapshot()
        assert sorted(r.url.path for r in seen) == [
            "/api/event/1234/avail",
            "/api/event/1234/dates",
            "/api/event/1234/tickets",
        ]
        for r in seen:
            assert r.method == "GET"
            assert r.url.params["user"] == "user-1"
            assert r.url.params["key"] == "secret-key"
            assert r.url.params["version"] == "1"

    @pytest.mark.asyncio
    async def test_tickets_500_fails_whole_snapshot(self, make_client):
        """A non-2xx on any resource raises UpstreamFetchError with resource and status."""
        with pytest.raises(UpstreamFetchError) as exc_info:
            await make_client(statuses={"tickets": 500}).fetch_snapshot()
        assert exc_info.value.resource == "tickets"
        assert exc_info.value.status_code == 500
        assert "500" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_failure_cancels_pending_requests(self, config):
        """When tickets fails, the slower dates/avail requests never complete."""
        finished = []

        async def handler(request: httpx.Request) -> httpx.Response:
            resource = request.url.path.rsplit("/", 1)[-1]
            if resource == "tickets":
                return httpx.Response(500, text="error")
            await asyncio.sleep(0.2)
            finished.append(resource)
            return httpx.Response(200, json=[])

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            client = BilletwebClient(config, http_client=http_client)
            with pytest.raises(UpstreamFetchError) as exc_info:
                await client.fetch_snapshot()
            await asyncio.sleep(0.5)
        assert exc_info.value.resource == "tickets"
        assert finished == []

    @pytest.mark.asyncio
    async def test_client_error_status_is_also_fatal(self, make_client):
        with pytest.raises(UpstreamError) as exc_info:
            await make_client(statuses={"avail": 403}).fetch_snapshot()
        assert exc_info.value.resource == "avail"


class TestFetchResource:
    """Single-resource helpers."""

    @pytest.mark.asyncio
    async def test_fetch_dates(self, make_client, dates):
        assert await make_client().fetch_dates() == dates

    @pytest.mark.asyncio
    async def test_fetch_avail_failure(self, make_client):
        with pytest.raises(UpstreamFetchError):
            await make_client(statuses={"avail": 502}).fetch_avail()
