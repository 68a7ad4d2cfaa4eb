"""Billetweb API client: lowest level, sends request only. No parsing beyond JSON, no retries."""
import asyncio
import logging
from typing import Any, NamedTuple

import httpx

from boxoffice.core.constants import RESOURCE_AVAIL, RESOURCE_DATES, RESOURCE_TICKETS
from boxoffice.core.errors import UpstreamFetchError
from boxoffice.services.billetweb.config import BilletwebConfig
from boxoffice.services.billetweb.types import BilletwebAvail, BilletwebDate, BilletwebTicket

logger = logging.getLogger(__name__)


class RawSnapshot(NamedTuple):
    """The three Billetweb arrays for one event, as returned by the API."""
    dates: list[BilletwebDate]
    tickets: list[BilletwebTicket]
    avail: list[BilletwebAvail]


class BilletwebClient:
    """Read-only Billetweb client for one event."""

    def __init__(self, config: BilletwebConfig, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        # Caller-owned client (tests, shared pools); otherwise one client per fetch_snapshot call.
        self._http_client = http_client

    async def _get(self, c: httpx.AsyncClient, resource: str) -> list[Any]:
        url = self._config.resource_url(resource)
        logger.debug("Billetweb GET %s", resource)
        r = await c.get(url, params=self._config.params())
        if not r.is_success:
            logger.warning("Billetweb %s failed: %s", resource, r.status_code)
            raise UpstreamFetchError(resource, r.status_code, detail=(r.text[:500] if r.text else None))
        return r.json()

    async def fetch_resource(self, resource: str) -> list[Any]:
        """GET one resource (dates, tickets or avail). Raises UpstreamFetchError on non-2xx."""
        if self._http_client is not None:
            return await self._get(self._http_client, resource)
        async with httpx.AsyncClient() as c:
            return await self._get(c, resource)

    async def fetch_dates(self) -> list[BilletwebDate]:
        return await self.fetch_resource(RESOURCE_DATES)

    async def fetch_tickets(self) -> list[BilletwebTicket]:
        return await self.fetch_resource(RESOURCE_TICKETS)

    async def fetch_avail(self) -> list[BilletwebAvail]:
        return await self.fetch_resource(RESOURCE_AVAIL)

    async def fetch_snapshot(self) -> RawSnapshot:
        """
        Fetch dates, tickets and avail concurrently and wait for all three.
        The first failure cancels the other requests and propagates as itself (no partial snapshot).
        """
        if self._http_client is not None:
            return await self._gather(self._http_client)
        async with httpx.AsyncClient() as c:
            return await self._gather(c)

    async def _gather(self, c: httpx.AsyncClient) -> RawSnapshot:
        # TaskGroup cancels the other requests as soon as one fails.
        try:
            async with asyncio.TaskGroup() as tg:
                dates = tg.create_task(self._get(c, RESOURCE_DATES))
                tickets = tg.create_task(self._get(c, RESOURCE_TICKETS))
                avail = tg.create_task(self._get(c, RESOURCE_AVAIL))
        except ExceptionGroup as eg:
            upstream = [e for e in eg.exceptions if isinstance(e, UpstreamFetchError)]
            raise (upstream or list(eg.exceptions))[0] from None
        return RawSnapshot(dates=dates.result(), tickets=tickets.result(), avail=avail.result())
