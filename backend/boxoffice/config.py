"""
Application settings (Pydantic Settings).

Billetweb credentials and the event id are required. load_settings() is the startup
check: entrypoints call it once and fail fast if anything is missing.
"""
from pathlib import Path
from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from boxoffice.core.constants import DEFAULT_API_BASE, DEFAULT_COVER_URL, DEFAULT_SHOP_URL
from boxoffice.core.errors import MissingConfigurationError

# .env next to backend/ (parent of boxoffice/)
_env_path = Path(__file__).resolve().parent.parent / ".env"

REQUIRED_ENV_VARS = ("BILLETWEB_API_USER", "BILLETWEB_API_KEY", "BILLETWEB_EVENT_ID")


class Settings(BaseSettings):
    # Billetweb: BILLETWEB_API_USER, BILLETWEB_API_KEY, BILLETWEB_EVENT_ID in .env
    billetweb_api_user: str
    billetweb_api_key: str
    billetweb_event_id: str
    billetweb_api_base: str = DEFAULT_API_BASE
    billetweb_shop_url: str = DEFAULT_SHOP_URL
    billetweb_cover_url: str = DEFAULT_COVER_URL

    class Config:
        env_file = _env_path
        extra = "ignore"

    @field_validator("billetweb_api_user", "billetweb_api_key", "billetweb_event_id", mode="after")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("must not be blank")
        return v


def load_settings(**overrides: Any) -> Settings:
    """
    Build Settings from env/.env (plus explicit overrides, mainly for tests).
    Raises MissingConfigurationError listing every required variable that is absent or blank.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = sorted(
            {
                str(err["loc"][0]).upper()
                for err in e.errors()
                if err.get("loc") and str(err["loc"][0]).upper() in REQUIRED_ENV_VARS
            }
        )
        if not missing:
            raise
        raise MissingConfigurationError(missing) from e
