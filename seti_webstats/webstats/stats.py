"""Parsed user statistics and their accessors."""

import copy
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from seti_webstats.base import VERSION
from seti_webstats.parser import LINK_TAG
from seti_webstats.types import Field, Link, StatsTree

if TYPE_CHECKING:
    from seti_webstats.webstats.users import StatsRequest

NO_HOME_PAGE = "No Home Page"
NO_URL = "No URL"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserStats:
    """Statistics of one SETI@home account.

    Only produced by a successful fetch, so every accessor works on a
    validated, parsed document. Nothing here does I/O.

    Usage:
        stats = create("foo@bar.org")
        print(stats.name(), stats.rank(), stats.rank_percent())

    Attributes:
        request: Request the stats were fetched with.
        body: Raw response body.
        data: Parsed document (see :func:`seti_webstats.parser.parse_stats`).
    """

    request: "StatsRequest"
    body: str
    data: StatsTree

    def _section(self, name: str) -> StatsTree:
        section = self.data.get(name)
        return section if isinstance(section, dict) else {}

    def _user_field(self, key: str) -> Field | None:
        return self._section("userinfo").get(key)

    def _rank_field(self, key: str) -> Field | None:
        return self._section("rankinfo").get(key)

    # UserInfo

    def user_info(self) -> StatsTree:
        """Return all user information fields.

        Example:
            {
                "usertime": "3.530 years",
                "avecpu": "15 hr 54 min 36.3 sec",
                "numresults": "670",
                "regdate": "Fri May 28 20:28:45 1999",
                "resultsperday": "0.51",
                "lastresulttime": "Sat Jun  8 03:47:50 2002",
                "cputime": "     1.217 years",
                "name": "John Doe",
            }
        """
        return copy.deepcopy(self._section("userinfo"))

    def user_time(self) -> Field | None:
        return self._user_field("usertime")

    def ave_cpu(self) -> Field | None:
        return self._user_field("avecpu")

    def num_results(self) -> Field | None:
        return self._user_field("numresults")

    def reg_date(self) -> Field | None:
        return self._user_field("regdate")

    def results_per_day(self) -> Field | None:
        return self._user_field("resultsperday")

    def last_result_time(self) -> Field | int:
        """Time of the last returned result, 0 if none was ever returned.

        Only a missing or empty field gives the integer 0; a field that
        reads "0" is returned as the string "0" like any other scalar.
        """
        return self._user_field("lastresulttime") or 0

    def cpu_time(self) -> Field | None:
        return self._user_field("cputime")

    def name(self) -> str | None:
        """Account name, without the home page link if one is attached."""
        value = self._user_field("name")
        if isinstance(value, Link):
            return value.text
        return value

    def home_page(self) -> str:
        value = self._user_field("name")
        if isinstance(value, Link) and value.href:
            return value.href
        return NO_HOME_PAGE

    def profile_url(self) -> str:
        value = self._user_field("userprofile")
        if isinstance(value, Link) and value.href:
            return value.href
        return NO_URL

    # RankInfo

    def rank_info(self) -> StatsTree:
        """Return all rank information fields.

        Example:
            {
                "num_samerank": "3",
                "ranktotalusers": "4152567",
                "top_rankpct": "0.516",
                "rank": "21410",
            }
        """
        return copy.deepcopy(self._section("rankinfo"))

    def have_same_rank(self) -> Field | None:
        return self._rank_field("num_samerank")

    def total_users(self) -> Field | None:
        return self._rank_field("ranktotalusers")

    def rank(self) -> Field | None:
        return self._rank_field("rank")

    def rank_percent(self) -> float | None:
        """Share of users ranked below this account, in percent.

        Computed as ``100 - top_rankpct`` in decimal arithmetic so the
        result matches the server's figures digit for digit.
        """
        value = self._rank_field("top_rankpct")
        if value is None:
            return None
        try:
            return float(Decimal(100) - Decimal(str(value).strip()))
        except InvalidOperation:
            logger.warning("top_rankpct is not a number: %r", value)
            return None

    # GroupInfo

    def _group(self) -> Field | None:
        group = self._section("groupinfo").get("group")
        if isinstance(group, dict):
            return group.get(LINK_TAG)
        return group

    def group_info(self) -> Link | None:
        """Link record of the account's group, None if not in a group."""
        info = self.data.get("groupinfo")
        if isinstance(info, Link):
            return info
        if isinstance(info, dict) and isinstance(info.get(LINK_TAG), Link):
            return info[LINK_TAG]
        group = self._group()
        return group if isinstance(group, Link) else None

    def group_name(self) -> str | None:
        group = self._group()
        if isinstance(group, Link):
            return group.text
        return group

    def group_url(self) -> str | None:
        group = self._group()
        if isinstance(group, Link):
            return group.href
        return None

    # Request / debug

    def url(self) -> str:
        return self.request.url

    def email(self) -> str:
        return self.request.email

    def raw_body(self) -> str:
        """Response body exactly as received, for debugging."""
        return self.body

    def xml(self) -> str:
        return self.body

    def version(self) -> str:
        return VERSION
