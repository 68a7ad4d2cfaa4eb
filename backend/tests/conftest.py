"""Shared fixtures: Billetweb payloads and a mocked transport."""
import json

import httpx
import pytest

from boxoffice.services.billetweb import BilletwebClient, BilletwebConfig
from boxoffice.services.buy_tickets_service import BuyTicketsService

SHOP_URL = "https://www.billetweb.fr/shop.php?event=esperanza-spectacle-musical"
COVER_URL = "https://www.billetweb.fr/files/page/esperanza-spectacle-musical.png"


@pytest.fixture
def dates():
    return [
        {"id": "1", "start": "2026-04-24 20:00", "end": "2026-04-24 22:30", "description": "", "quota": "300", "total_sales": "100"},
        {"id": "2", "start": "2026-04-25 20:00", "end": "2026-04-25 22:30", "description": "Audiodescription", "quota": "300", "total_sales": "290"},
        {"id": "3", "start": "2026-04-26 15:00", "end": "2026-04-26 17:30", "description": "", "quota": "300", "total_sales": "300"},
    ]


@pytest.fixture
def tickets():
    return [
        {"id": "a", "name": "-12 ans", "price": 10, "visibility": "0"},
        {"id": "b", "name": "Adulte", "price": 18, "visibility": "0"},
        {"id": "c", "name": "Invitation", "price": 0, "visibility": "0"},
        {"id": "d", "name": "Partenaire", "price": 12, "visibility": "1"},
        {"id": "e", "name": "12-25 ans", "price": 14, "visibility": "0"},
    ]


@pytest.fixture
def avail():
    return [
        {"id": "1", "avail": "200", "sales": "100"},
        {"id": "2", "avail": "10", "sales": "290"},
        {"id": "3", "avail": "0", "sales": "300"},
    ]


@pytest.fixture
def config():
    return BilletwebConfig(api_user="user-1", api_key="secret-key", event_id="1234")


def make_transport(payloads, statuses=None, seen=None):
    """MockTransport answering /event/{id}/{resource} from payloads; statuses overrides per resource."""
    statuses = statuses or {}

    def handler(request: httpx.Request) -> httpx.Response:
        resource = request.url.path.rsplit("/", 1)[-1]
        if seen is not None:
            seen.append(request)
        status = statuses.get(resource, 200)
        if status != 200:
            return httpx.Response(status, text="error")
        return httpx.Response(200, content=json.dumps(payloads[resource]), headers={"content-type": "application/json"})

    return httpx.MockTransport(handler)


@pytest.fixture
def make_client(config, dates, tickets, avail):
    """Factory for a BilletwebClient backed by a MockTransport."""

    def _make(payloads=None, statuses=None, seen=None):
        payloads = payloads or {"dates": dates, "tickets": tickets, "avail": avail}
        http_client = httpx.AsyncClient(transport=make_transport(payloads, statuses, seen))
        return BilletwebClient(config, http_client=http_client)

    return _make


@pytest.fixture
def make_service(make_client):
    """Factory for a BuyTicketsService backed by a MockTransport."""

    def _make(payloads=None, statuses=None, seen=None):
        return BuyTicketsService(make_client(payloads, statuses, seen), shop_url=SHOP_URL, cover_url=COVER_URL)

    return _make


@pytest.fixture
def shop_url():
    return SHOP_URL


@pytest.fixture
def cover_url():
    return COVER_URL
