"""
buy-tickets over HTTP, for hosts that call tools through a plain endpoint instead of MCP.
"""
import logging
from typing import Any, NoReturn

from fastapi import APIRouter, Depends, Request

from boxoffice.core.errors import tool_error_to_http
from boxoffice.services.buy_tickets_service import BuyTicketsService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_buy_tickets_service(request: Request) -> BuyTicketsService:
    return request.app.state.buy_tickets_service


def _handle_tool_error(exc: Exception, log_message: str) -> NoReturn:
    logger.exception(log_message)
    raise tool_error_to_http(exc) from exc


@router.post("/buy-tickets", response_model=dict)
async def buy_tickets(service: BuyTicketsService = Depends(get_buy_tickets_service)) -> dict[str, Any]:
    """Same envelope as the MCP tool: structuredContent, content (text block), _meta for the widget."""
    try:
        response = await service.invoke()
    except Exception as e:
        _handle_tool_error(e, "buy-tickets failed")
    return {
        "structuredContent": response.structured,
        "content": [{"type": "text", "text": response.narrative}],
        "_meta": response.metadata,
    }
