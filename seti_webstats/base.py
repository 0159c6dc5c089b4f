"""Base client and utilities for SETI@home WebStats client."""

import logging
from dataclasses import dataclass, field
from typing import Any, Self

import httpx

from .exceptions import ConfigurationError, NetworkError
from .parser import decode_document

VERSION = "1.0.0"
DEFAULT_USER_AGENT = f"seti-webstats/{VERSION}"

logger = logging.getLogger(__name__)


@dataclass
class BaseAPIClient:
    """Base sync client for SETI@home web server.

    Features:
    - Sync context manager owning one httpx.Client
    - Transport failures and non-2xx statuses mapped to NetworkError
    - Identifies itself with a versioned User-Agent

    No retries are made: a failed request is final and the caller
    decides whether to try again.

    Attributes:
        base_url: Base URL of the web server.
        timeout: Request timeout in seconds.
        user_agent: Value sent in the User-Agent header.
    """

    base_url: str
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    _client: httpx.Client | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    def __enter__(self) -> Self:
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            follow_redirects=True,
        )
        return self

    def __exit__(self, *args: Any) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise NetworkError for non-2xx status codes."""
        status = response.status_code

        if 200 <= status < 300:
            return

        reason = response.reason_phrase or "Request failed"
        raise NetworkError(
            f"HTTP {status} {reason}",
            status_code=status,
            body=response.text,
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make a single HTTP request, mapping failures to NetworkError."""
        if self._client is None:
            raise ConfigurationError(
                f"{type(self).__name__} is not open, use it as a context manager"
            )

        logger.debug("%s %s", method, endpoint)
        try:
            response = self._client.request(method, endpoint, **kwargs)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Timeout: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)
        self._raise_for_status(response)
        return response

    def get_text(self, endpoint: str, **kwargs: Any) -> str:
        """Make GET request and return the decoded response body.

        An encoding declared in the XML prolog wins over the Content-Type
        charset, which the server usually leaves out.
        """
        response = self._request("GET", endpoint, **kwargs)
        return decode_document(response.content, response.charset_encoding)
