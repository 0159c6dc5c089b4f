"""Pytest configuration and fixtures."""

import pytest

from seti_webstats import StatsRequest, UserStats, parse_stats

BASE_URL = "http://setiathome.sol.berkeley.edu"
ENDPOINT = "/fcgi-bin/fcgi"

USER_XML = """<?xml version="1.0" encoding="ISO-8859-1" ?>
<userstats>
  <userinfo>
    <name><a href="http://www.example.org/~jdoe">John Doe</a></name>
    <userprofile><a href="http://setiathome.ssl.berkeley.edu/fcgi-bin/fcgi?cmd=view_profile&amp;userid=1234">View</a></userprofile>
    <numresults>670</numresults>
    <cputime>     1.217 years</cputime>
    <avecpu>15 hr 54 min 36.3 sec</avecpu>
    <resultsperday>0.51</resultsperday>
    <lastresulttime>Sat Jun  8 03:47:50 2002</lastresulttime>
    <regdate>Fri May 28 20:28:45 1999</regdate>
    <usertime>3.530 years</usertime>
  </userinfo>
  <groupinfo>
    <group><a href="http://setiathome.ssl.berkeley.edu/stats/team/team_42.html">SETI.Germany</a></group>
  </groupinfo>
  <rankinfo>
    <ranktotalusers>4152567</ranktotalusers>
    <num_samerank>3</num_samerank>
    <top_rankpct>0.516</top_rankpct>
    <rank>21410</rank>
  </rankinfo>
</userstats>
"""

MINIMAL_XML = (
    "<xml><userinfo><name>John Doe</name><numresults>670</numresults></userinfo>"
    "<rankinfo><rank>21410</rank><top_rankpct>0.516</top_rankpct></rankinfo></xml>"
)

NO_USER_BODY = "No user with that name was found."


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: integration tests against the real SETI@home server")


def _make_stats(xml: str, email: str = "foo@bar.org") -> UserStats:
    request = StatsRequest(
        email=email,
        url=f"{BASE_URL}{ENDPOINT}?cmd=user_xml&email={email.replace('@', '%40')}",
    )
    return UserStats(request=request, body=xml, data=parse_stats(xml))


@pytest.fixture
def user_xml() -> str:
    return USER_XML


@pytest.fixture
def minimal_xml() -> str:
    return MINIMAL_XML


@pytest.fixture
def no_user_body() -> str:
    return NO_USER_BODY


@pytest.fixture
def make_stats():
    """Factory fixture building UserStats straight from a document, without HTTP."""
    return _make_stats


@pytest.fixture
def full_stats() -> UserStats:
    return _make_stats(USER_XML)


@pytest.fixture
def minimal_stats() -> UserStats:
    return _make_stats(MINIMAL_XML)
