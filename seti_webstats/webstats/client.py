"""SETI@home WebStats client."""

import logging
from dataclasses import dataclass, field
from typing import Any

from seti_webstats.base import BaseAPIClient
from seti_webstats.endpoints import BaseURLs
from seti_webstats.exceptions import WebStatsError
from .stats import UserStats
from .users import UsersAPI

logger = logging.getLogger(__name__)


@dataclass
class WebStatsClient(BaseAPIClient):
    """Client for SETI@home web server statistics.

    Usage:
        with WebStatsClient() as client:
            stats = client.users.get_user_stats("foo@bar.org")
            print(stats.rank())
    """

    base_url: str = BaseURLs.SETI

    users: UsersAPI = field(init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.users = UsersAPI(self)


def create(email: str | None, **client_kwargs: Any) -> UserStats:
    """Fetch the stats of one account with a short-lived client.

    Args:
        email: E-mail address of the SETI@home account.
        **client_kwargs: Passed to WebStatsClient (base_url, timeout, user_agent).

    Raises:
        ConfigurationError: Empty address or bad client settings.
        NetworkError: Server unreachable or non-2xx response.
        InvalidAccountError: No account for this address.
        ResponseParseError: Body is not well-formed XML.
    """
    with WebStatsClient(**client_kwargs) as client:
        return client.users.get_user_stats(email)


def try_create(email: str | None, **client_kwargs: Any) -> UserStats | WebStatsError:
    """Same as create(), but returns the error instead of raising it.

    Usage:
        result = try_create("foo@bar.org")
        if isinstance(result, WebStatsError):
            ...
        else:
            print(result.rank())
    """
    try:
        return create(email, **client_kwargs)
    except WebStatsError as e:
        logger.debug("Stats lookup for %r failed: %s", email, e)
        return e
