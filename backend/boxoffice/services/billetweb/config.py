"""Billetweb API config. Built from Settings (see boxoffice.config) or explicit args."""
from boxoffice.config import Settings
from boxoffice.core.constants import API_VERSION, DEFAULT_API_BASE


class BilletwebConfig:
    """API credentials, event id and base URL for Billetweb."""

    __slots__ = ("api_user", "api_key", "event_id", "base_url")

    def __init__(
        self,
        *,
        api_user: str,
        api_key: str,
        event_id: str,
        base_url: str = DEFAULT_API_BASE,
    ) -> None:
        self.api_user = api_user.strip()
        self.api_key = api_key.strip()
        self.event_id = event_id.strip()
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "BilletwebConfig":
        return cls(
            api_user=settings.billetweb_api_user,
            api_key=settings.billetweb_api_key,
            event_id=settings.billetweb_event_id,
            base_url=settings.billetweb_api_base,
        )

    def resource_url(self, resource: str) -> str:
        """Full URL for one event resource, e.g. .../event/1234/dates."""
        return f"{self.base_url}/event/{self.event_id}/{resource}"

    def params(self) -> dict[str, str]:
        """Query parameters sent with every call."""
        return {"user": self.api_user, "key": self.api_key, "version": API_VERSION}
