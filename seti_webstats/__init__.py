"""SETI@home WebStats - Python client for SETI@home user statistics."""

from .base import VERSION, BaseAPIClient
from .endpoints import BaseURLs, Commands, Endpoints
from .exceptions import (
    ConfigurationError,
    InvalidAccountError,
    NetworkError,
    ResponseParseError,
    WebStatsError,
)
from .parser import parse_stats
from .types import Field, Link, StatsTree
from .webstats import StatsRequest, UserStats, UsersAPI, WebStatsClient, create, try_create

__all__ = [
    # Clients
    "BaseAPIClient",
    "WebStatsClient",
    "UsersAPI",
    "create",
    "try_create",
    # Results
    "StatsRequest",
    "UserStats",
    "parse_stats",
    # Endpoints
    "BaseURLs",
    "Endpoints",
    "Commands",
    # Exceptions
    "WebStatsError",
    "ConfigurationError",
    "NetworkError",
    "InvalidAccountError",
    "ResponseParseError",
    # Types
    "Field",
    "Link",
    "StatsTree",
]

__version__ = VERSION
