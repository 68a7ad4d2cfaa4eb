"""Billetweb API client: event dates, tickets and availability. Client below just sends the request."""
from boxoffice.services.billetweb.client import BilletwebClient, RawSnapshot
from boxoffice.services.billetweb.config import BilletwebConfig

__all__ = [
    "BilletwebClient",
    "BilletwebConfig",
    "RawSnapshot",
]
