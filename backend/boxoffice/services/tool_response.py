"""
Package an AvailabilitySnapshot for the host runtime.

Three views of the same data:
- structured: summary for the model (title, venue, dates, pricing, availabilityNotes only when non-empty)
- narrative: French text for conversational display; never includes total remaining seats
- metadata: full sessions, public tiers and URLs; the only data the widget receives
"""
from typing import Any

from pydantic import BaseModel

from boxoffice.data.esperanza import BACKGROUND_HEADER, EventInfo
from boxoffice.services.availability.formatting import format_tier
from boxoffice.services.availability.types import AvailabilitySnapshot


class ToolResponse(BaseModel):
    structured: dict[str, Any]
    narrative: str
    metadata: dict[str, Any]


def build_structured(snapshot: AvailabilitySnapshot, event: EventInfo) -> dict[str, Any]:
    structured: dict[str, Any] = {
        "title": event["title"],
        "venue": event["venue"],
        "dates": [s.start for s in snapshot.sessions],
        "pricing": [format_tier(t) for t in snapshot.tiers],
    }
    # Omitted (not []) when there is nothing to report.
    if snapshot.notices:
        structured["availabilityNotes"] = list(snapshot.notices)
    return structured


def build_narrative(snapshot: AvailabilitySnapshot, event: EventInfo) -> str:
    lines = [event["summary"], event["pricing_summary"], *snapshot.notices, "", BACKGROUND_HEADER]
    lines.extend(f"- {fact}" for fact in event["background"])
    return "\n".join(lines)


def build_metadata(snapshot: AvailabilitySnapshot, *, shop_url: str, cover_url: str) -> dict[str, Any]:
    return {
        "sessions": [s.model_dump(mode="json") for s in snapshot.sessions],
        "tickets": [t.to_meta() for t in snapshot.tiers],
        "shopBase": shop_url,
        "coverUrl": cover_url,
    }


def build_tool_response(
    snapshot: AvailabilitySnapshot,
    event: EventInfo,
    *,
    shop_url: str,
    cover_url: str,
) -> ToolResponse:
    """Formatting only: no fetch, no further computation."""
    return ToolResponse(
        structured=build_structured(snapshot, event),
        narrative=build_narrative(snapshot, event),
        metadata=build_metadata(snapshot, shop_url=shop_url, cover_url=cover_url),
    )
