"""
FastAPI app entrypoint.

Serves buy-tickets over HTTP. Settings are validated in the lifespan, so a missing
Billetweb secret stops startup instead of failing the first request.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env from backend/ before any settings are read
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from boxoffice.api.routes import tickets
from boxoffice.config import load_settings
from boxoffice.core.constants import SERVER_NAME, SERVER_VERSION
from boxoffice.services.buy_tickets_service import BuyTicketsService

logger = logging.getLogger(__name__)


def create_app(service: BuyTicketsService | None = None) -> FastAPI:
    """Build the app. Pass a service to skip settings (tests, embedding)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if service is None:
            settings = load_settings()
            app.state.buy_tickets_service = BuyTicketsService.from_settings(settings)
        else:
            app.state.buy_tickets_service = service
        logger.info("Box office ready (tool endpoint /tools/buy-tickets)")
        yield

    app = FastAPI(title="Esperanza box office", version=SERVER_VERSION, lifespan=lifespan)
    app.include_router(tickets.router, prefix="/tools", tags=["tools"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "server": SERVER_NAME}

    return app


app = create_app()
