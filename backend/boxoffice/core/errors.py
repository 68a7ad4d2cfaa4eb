"""
Centralized error handling for tool and API failures.
Exception types plus a reusable mapping so routes stay thin and new error types are easy to add.
"""
from __future__ import annotations

from fastapi import HTTPException


class BoxOfficeError(Exception):
    """Base class for errors raised by this package."""


class UpstreamFetchError(BoxOfficeError):
    """A Billetweb call returned a non-success status. Fatal to the whole invocation."""

    def __init__(self, resource: str, status_code: int, detail: str | None = None) -> None:
        self.resource = resource
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Billetweb API error: {status_code} ({resource})")


# Short name used by the provider client contract.
UpstreamError = UpstreamFetchError


class MissingConfigurationError(BoxOfficeError):
    """One or more required settings are absent. Raised at startup, never at first request."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}. Add them to the environment or backend/.env.")


# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_GATEWAY = 502  # Billetweb answered with an error
STATUS_SERVICE_UNAVAILABLE = 503  # misconfigured deployment
STATUS_INTERNAL_ERROR = 500

MSG_UPSTREAM_FAILED = "Ticketing provider unavailable. Try again shortly."
MSG_NOT_CONFIGURED = "Ticketing service is not configured."


# ---------------------------------------------------------------------------
# Error rules: (exception type, status_code, detail_message)
# Add new rules here instead of scattering checks in routes.
# ---------------------------------------------------------------------------

# First match wins.
TOOL_ERROR_RULES: list[tuple[type[Exception], int, str]] = [
    (UpstreamFetchError, STATUS_BAD_GATEWAY, MSG_UPSTREAM_FAILED),
    (MissingConfigurationError, STATUS_SERVICE_UNAVAILABLE, MSG_NOT_CONFIGURED),
]


def tool_error_to_http(exc: Exception) -> HTTPException:
    """
    Map an exception from a tool invocation into an HTTPException.
    Uses TOOL_ERROR_RULES for known error types; otherwise returns 500 with the exception message.
    """
    for exc_type, status_code, detail in TOOL_ERROR_RULES:
        if isinstance(exc, exc_type):
            return HTTPException(status_code=status_code, detail=detail)
    return HTTPException(status_code=STATUS_INTERNAL_ERROR, detail=str(exc))
