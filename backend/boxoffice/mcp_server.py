"""
MCP entrypoint: exposes buy-tickets to the host runtime over stdio.

Run: BILLETWEB_API_USER=... BILLETWEB_API_KEY=... BILLETWEB_EVENT_ID=... python -m boxoffice.mcp_server
Settings are checked before the server starts; a missing secret stops the process immediately.
"""
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent, ToolAnnotations

from boxoffice.config import load_settings
from boxoffice.core.constants import BILLETWEB_DOMAIN, SERVER_NAME, TOOL_NAME
from boxoffice.services.buy_tickets_service import BuyTicketsService

logger = logging.getLogger(__name__)

# Domains the widget may fetch from, load images from and redirect to.
UI_CSP = {
    "connectDomains": [BILLETWEB_DOMAIN],
    "resourceDomains": [BILLETWEB_DOMAIN],
    "redirectDomains": [BILLETWEB_DOMAIN],
}

BUY_TICKETS_ANNOTATIONS = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    openWorldHint=False,
)


async def call_buy_tickets(service: BuyTicketsService) -> CallToolResult:
    """Run one invocation. Errors propagate so the host reports them; nothing partial is returned."""
    response = await service.invoke()
    return CallToolResult(
        content=[TextContent(type="text", text=response.narrative)],
        structuredContent=response.structured,
        _meta={**response.metadata, "ui": {"csp": UI_CSP}},
    )


def create_server(service: BuyTicketsService) -> FastMCP:
    server = FastMCP(SERVER_NAME)

    async def buy_tickets() -> CallToolResult:
        logger.info("Tool %s invoked", TOOL_NAME)
        return await call_buy_tickets(service)

    server.tool(
        name=TOOL_NAME,
        description=service.event["tool_description"],
        annotations=BUY_TICKETS_ANNOTATIONS,
        structured_output=False,
    )(buy_tickets)
    return server


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = load_settings()
    create_server(BuyTicketsService.from_settings(settings)).run()


if __name__ == "__main__":
    main()
