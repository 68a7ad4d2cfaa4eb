"""Parsed Billetweb records and the aggregated view shared by the tool response and the widget."""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from boxoffice.core.constants import LOW_AVAILABILITY_THRESHOLD, PUBLIC_VISIBILITY


class SessionStatus(str, Enum):
    SOLD_OUT = "sold_out"
    LOW_STOCK = "low_stock"
    AVAILABLE = "available"


def session_status(remaining: int, threshold: int = LOW_AVAILABILITY_THRESHOLD) -> SessionStatus:
    """sold_out at remaining <= 0, low_stock up to and including threshold, else available."""
    if remaining <= 0:
        return SessionStatus.SOLD_OUT
    if remaining <= threshold:
        return SessionStatus.LOW_STOCK
    return SessionStatus.AVAILABLE


class _Record(BaseModel):
    # Billetweb sends ids and counters as strings or numbers depending on the endpoint.
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)


class Session(_Record):
    """One performance (/dates)."""

    id: str
    start: str
    end: str = ""
    description: str = ""
    quota: int = 0

    @field_validator("description", "end", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class TicketTier(_Record):
    """One price category (/tickets)."""

    id: str
    name: str
    price: float
    visibility: str = ""

    @property
    def is_public(self) -> bool:
        return self.visibility == PUBLIC_VISIBILITY

    def to_meta(self) -> dict[str, Any]:
        """Shape sent to the widget: id, name, price."""
        return {"id": self.id, "name": self.name, "price": self.price}


class AvailabilityCounter(_Record):
    """Sales counter for one performance (/avail)."""

    id: str
    remaining: int = Field(default=0, alias="avail")
    sold: int = Field(default=0, alias="sales")


class AggregatedSession(_Record):
    """Session joined with its counter. remaining/sold default to 0 when the counter is missing."""

    id: str
    start: str
    description: str = ""
    remaining: int = 0
    sold: int = 0
    quota: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> SessionStatus:
        return session_status(self.remaining)

    @property
    def sold_out(self) -> bool:
        return self.status is SessionStatus.SOLD_OUT

    @property
    def low_stock(self) -> bool:
        return self.status is SessionStatus.LOW_STOCK


class AvailabilitySnapshot(BaseModel):
    """Aggregator output for one invocation."""

    sessions: list[AggregatedSession]
    tiers: list[TicketTier]
    notices: list[str]
