"""Tests for exception classes."""

from seti_webstats import (
    ConfigurationError,
    InvalidAccountError,
    NetworkError,
    ResponseParseError,
    WebStatsError,
)


class TestWebStatsError:
    def test_str_with_status(self) -> None:
        err = WebStatsError("Not found", status_code=404)
        assert str(err) == "[404] Not found"

    def test_str_without_status(self) -> None:
        err = WebStatsError("Something went wrong")
        assert str(err) == "Something went wrong"

    def test_body_stored(self) -> None:
        err = WebStatsError("Error", status_code=500, body="<html>oops</html>")
        assert err.body == "<html>oops</html>"
        assert err.message == "Error"
        assert err.status_code == 500

    def test_body_defaults_to_empty_string(self) -> None:
        err = WebStatsError("Error")
        assert err.body == ""


class TestSubclasses:
    def test_all_are_webstats_errors(self) -> None:
        for cls in (ConfigurationError, NetworkError, ResponseParseError):
            assert isinstance(cls("boom"), WebStatsError)
        assert isinstance(InvalidAccountError("foo@bar.org"), WebStatsError)

    def test_network_error_str(self) -> None:
        err = NetworkError("HTTP 503 Service Unavailable", status_code=503)
        assert str(err) == "[503] HTTP 503 Service Unavailable"


class TestInvalidAccountError:
    def test_names_the_address(self) -> None:
        err = InvalidAccountError("foo@bar.org")
        assert err.email == "foo@bar.org"
        assert str(err) == "foo@bar.org is not a valid SETI@home account"

    def test_custom_message(self) -> None:
        err = InvalidAccountError("foo@bar.org", message="gone", body="No user")
        assert str(err) == "gone"
        assert err.body == "No user"
