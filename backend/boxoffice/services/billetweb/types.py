"""
Typed definitions for Billetweb API responses.

All three endpoints (GET /event/{id}/dates, /tickets, /avail) return a JSON array.
Billetweb sends most numbers as strings ("100", "5"); the aggregator parses them.
"""

from typing import TypedDict


class BilletwebDate(TypedDict, total=False):
    """One performance from /event/{id}/dates."""
    id: str
    start: str  # e.g. "2026-04-24 20:00"
    end: str
    description: str  # free text, often empty
    quota: str  # capacity, numeric string
    total_sales: str


class BilletwebTicket(TypedDict, total=False):
    """One price category from /event/{id}/tickets."""
    id: str
    name: str  # e.g. "Adulte"
    price: float  # euros, sent as a number
    visibility: str  # "0" = public


class BilletwebAvail(TypedDict, total=False):
    """Sales counter for one performance from /event/{id}/avail. id matches BilletwebDate.id."""
    id: str
    avail: str  # remaining seats, numeric string, may be "0" or negative
    sales: str  # seats sold, numeric string
