from boxoffice.services.buy_tickets_service import BuyTicketsService
from boxoffice.services.tool_response import ToolResponse, build_tool_response

__all__ = ["BuyTicketsService", "ToolResponse", "build_tool_response"]
