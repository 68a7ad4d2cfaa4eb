"""
Merge Billetweb dates, tickets and avail into one view with derived status and notices.

Pure functions: same three inputs, same snapshot. Nothing is cached between invocations.
"""
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from boxoffice.services.availability.types import (
    AggregatedSession,
    AvailabilityCounter,
    AvailabilitySnapshot,
    Session,
    TicketTier,
)

logger = logging.getLogger(__name__)

LOW_STOCK_NOTICE = "Attention : la séance du {start} est presque complète ({remaining} places restantes)."
SOLD_OUT_NOTICE = "La séance du {start} est complète."


def filter_public_tiers(tickets: Iterable[TicketTier]) -> list[TicketTier]:
    """Public tiers with a price, most expensive first. Hidden tiers and free comps are never offered."""
    public = [t for t in tickets if t.is_public and t.price > 0]
    # sorted() is stable, so equal prices keep Billetweb's order
    return sorted(public, key=lambda t: t.price, reverse=True)


def merge_availability(
    sessions: Iterable[Session],
    counters: Iterable[AvailabilityCounter],
) -> list[AggregatedSession]:
    """
    Left join sessions with counters by id, keeping session order.
    Counters for unknown sessions are ignored. A session with no counter gets remaining=0, sold=0,
    which makes it sold out: conservative, not a reflection of Billetweb's real state.
    """
    by_id: dict[str, AvailabilityCounter] = {}
    for c in counters:
        # first counter wins on duplicate ids
        by_id.setdefault(c.id, c)
    merged: list[AggregatedSession] = []
    for s in sessions:
        c = by_id.get(s.id)
        merged.append(
            AggregatedSession(
                id=s.id,
                start=s.start,
                description=s.description,
                remaining=c.remaining if c else 0,
                sold=c.sold if c else 0,
                quota=s.quota,
            )
        )
    return merged


def build_notices(sessions: Iterable[AggregatedSession]) -> list[str]:
    """Low-stock warnings first, then sold-out lines, each in session order. Empty when nothing to report."""
    sessions = list(sessions)
    low = [LOW_STOCK_NOTICE.format(start=s.start, remaining=s.remaining) for s in sessions if s.low_stock]
    sold_out = [SOLD_OUT_NOTICE.format(start=s.start) for s in sessions if s.sold_out]
    return low + sold_out


def aggregate(
    dates: Iterable[Mapping[str, Any]],
    tickets: Iterable[Mapping[str, Any]],
    avail: Iterable[Mapping[str, Any]],
) -> AvailabilitySnapshot:
    """Parse the three raw Billetweb arrays and build the snapshot. Parse errors propagate (ValidationError)."""
    sessions = [Session.model_validate(d) for d in dates]
    tiers = [TicketTier.model_validate(t) for t in tickets]
    counters = [AvailabilityCounter.model_validate(a) for a in avail]

    merged = merge_availability(sessions, counters)
    snapshot = AvailabilitySnapshot(
        sessions=merged,
        tiers=filter_public_tiers(tiers),
        notices=build_notices(merged),
    )
    logger.info(
        "Aggregated %s sessions, %s public tiers, %s notices",
        len(snapshot.sessions),
        len(snapshot.tiers),
        len(snapshot.notices),
    )
    return snapshot
