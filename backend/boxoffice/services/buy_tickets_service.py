"""
buy-tickets invocation: fetch the Billetweb snapshot, aggregate, build the tool response.
Shared by the MCP server and the HTTP route.
"""
import logging

from boxoffice.config import Settings
from boxoffice.data.esperanza import EventInfo, get_event_info
from boxoffice.services.availability import aggregate
from boxoffice.services.billetweb import BilletwebClient, BilletwebConfig
from boxoffice.services.tool_response import ToolResponse, build_tool_response

logger = logging.getLogger(__name__)


class BuyTicketsService:
    """One service per process; every call re-fetches and re-merges the full snapshot."""

    def __init__(
        self,
        client: BilletwebClient,
        *,
        shop_url: str,
        cover_url: str,
        event: EventInfo | None = None,
    ) -> None:
        self._client = client
        self.shop_url = shop_url
        self.cover_url = cover_url
        self.event = event or get_event_info()

    @classmethod
    def from_settings(cls, settings: Settings) -> "BuyTicketsService":
        return cls(
            BilletwebClient(BilletwebConfig.from_settings(settings)),
            shop_url=settings.billetweb_shop_url,
            cover_url=settings.billetweb_cover_url,
        )

    async def invoke(self) -> ToolResponse:
        """Raises UpstreamFetchError (or a parse error) with no partial response."""
        raw = await self._client.fetch_snapshot()
        snapshot = aggregate(raw.dates, raw.tickets, raw.avail)
        return build_tool_response(snapshot, self.event, shop_url=self.shop_url, cover_url=self.cover_url)
