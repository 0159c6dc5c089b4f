"""Base URLs and endpoint constants for SETI@home web server.

The stats server exposes everything through a single FastCGI script;
the requested document is selected by the ``cmd`` query parameter.
"""

from enum import StrEnum


class BaseURLs(StrEnum):
    """Base URLs for SETI@home web servers.

    Usage:
        client = WebStatsClient(base_url=BaseURLs.SETI)

    Each URL can be used directly as a string since StrEnum inherits from str.
    """

    SETI = "http://setiathome.sol.berkeley.edu"


class Endpoints:
    """Common endpoint paths."""

    FCGI = "/fcgi-bin/fcgi"


class Commands(StrEnum):
    """Values of the ``cmd`` query parameter understood by the FCGI endpoint."""

    USER_XML = "user_xml"


# Marker the server puts in the body when the e-mail has no account
NO_USER_MARKER = "No user"
