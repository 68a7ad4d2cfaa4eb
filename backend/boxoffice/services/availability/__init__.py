"""
Availability view for the event.
- aggregate() joins Billetweb dates, tickets and avail into sessions with status, public tiers and notices.
- formatting holds the French display strings shared by the tool response and the widget.
"""
from boxoffice.services.availability.aggregate import aggregate, build_notices, filter_public_tiers, merge_availability
from boxoffice.services.availability.types import (
    AggregatedSession,
    AvailabilityCounter,
    AvailabilitySnapshot,
    Session,
    SessionStatus,
    TicketTier,
    session_status,
)

__all__ = [
    "AggregatedSession",
    "AvailabilityCounter",
    "AvailabilitySnapshot",
    "Session",
    "SessionStatus",
    "TicketTier",
    "aggregate",
    "build_notices",
    "filter_public_tiers",
    "merge_availability",
    "session_status",
]
