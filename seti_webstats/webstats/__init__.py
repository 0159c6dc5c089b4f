"""SETI@home WebStats subclient."""

from .client import WebStatsClient, create, try_create
from .stats import UserStats
from .users import StatsRequest, UsersAPI

__all__ = ["WebStatsClient", "UsersAPI", "UserStats", "StatsRequest", "create", "try_create"]
