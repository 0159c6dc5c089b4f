"""Exceptions for SETI@home WebStats client."""

from typing import Any


class WebStatsError(Exception):
    """Base exception for WebStats errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body or ""

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ConfigurationError(WebStatsError):
    """Client was set up with unusable input (e.g. empty e-mail address)."""

    pass


class NetworkError(WebStatsError):
    """Stats server could not be reached or answered with non-2xx status.

    Raised when:
    - Connection is refused or times out
    - Server responds with 4xx/5xx
    """

    pass


class InvalidAccountError(WebStatsError):
    """Server reports no SETI@home account for the given address."""

    def __init__(
        self,
        email: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"{email} is not a valid SETI@home account",
            **kwargs,
        )
        self.email = email


class ResponseParseError(WebStatsError):
    """Response body is not well-formed XML."""

    pass
