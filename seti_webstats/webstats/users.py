"""Users API for SETI@home web server."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from seti_webstats.endpoints import NO_USER_MARKER, Commands, Endpoints
from seti_webstats.exceptions import ConfigurationError, InvalidAccountError
from seti_webstats.parser import parse_stats
from seti_webstats.webstats.stats import UserStats

if TYPE_CHECKING:
    from seti_webstats.webstats.client import WebStatsClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsRequest:
    """Account address and the URL its stats are fetched from."""

    email: str
    url: str


class UsersAPI:
    """Users subclient for SETI@home web server."""

    def __init__(self, client: "WebStatsClient") -> None:
        self._client = client

    def build_request(self, email: str | None) -> StatsRequest:
        """Build the user_xml request for an e-mail address.

        Raises:
            ConfigurationError: If the address is empty or missing.
        """
        if not email:
            raise ConfigurationError("No email address given")

        query = urlencode({"cmd": Commands.USER_XML.value, "email": email})
        base_url = str(self._client.base_url).rstrip("/")
        return StatsRequest(email=email, url=f"{base_url}{Endpoints.FCGI}?{query}")

    def get_user_stats(self, email: str | None) -> UserStats:
        """Fetch, validate and parse the stats of one account.

        Args:
            email: E-mail address the account is registered with.

        Returns:
            Parsed statistics, ready for querying.

        Raises:
            ConfigurationError: If the address is empty (no request is made).
            NetworkError: If the server is unreachable or answers non-2xx.
            InvalidAccountError: If the server knows no such account.
            ResponseParseError: If the body is not well-formed XML.
        """
        request = self.build_request(email)
        body = self._client.get_text(request.url)

        # Any "No user" in the body counts, even inside a field value
        if NO_USER_MARKER in body:
            logger.warning("No SETI@home account for %s", request.email)
            raise InvalidAccountError(request.email, body=body)

        return UserStats(request=request, body=body, data=parse_stats(body))
