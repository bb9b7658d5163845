"""
Purpose: Exception taxonomy shared by every export stage.
Constraints: Definitions only; errors propagate to the CLI unhandled.
"""

from typing import Optional


class ScrapExportError(Exception):
    """Base class for all failures surfaced to the operator."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ConfigError(ScrapExportError):
    """Environment or settings values failed validation."""


class InvalidIdentifier(ScrapExportError):
    """The URL or slug input did not yield a usable scrap identifier."""


class AutomationUnavailable(ScrapExportError):
    """The WebDriver endpoint could not be reached or refused a session."""


class SessionCookieNotFound(ScrapExportError):
    """Manual login finished but no session cookie was present."""

    def __init__(self, cookie_name: str):
        super().__init__(f"No '{cookie_name}' cookie found after login")
        self.cookie_name = cookie_name


class FetchFailed(ScrapExportError):
    def __init__(self, status: int, url: Optional[str] = None):
        message = f"HTTP {status}"
        if url:
            message += f" for {url}"
        super().__init__(message)
        self.status = status
        self.url = url


class MalformedResponse(ScrapExportError):
    """Response body was not JSON or did not match the scrap shape."""


class TransportError(ScrapExportError):
    """Network-level failure (DNS, refused connection, timeout...)."""
