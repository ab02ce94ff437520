"""
Tests for parsing, formatting and field assignment of URLs.

Run with:
    pytest code/tests/test_url_model.py -v
"""

import sys
from pathlib import Path

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import pytest

from core.query_params import QueryParamList
from core.url_model import (
    InvalidUrlError,
    ParsedUrl,
    format_url,
    get_field,
    parse_url,
    set_field,
)


class TestParseUrl:
    """Test parsing text into a ParsedUrl."""

    def test_parse_all_fields(self):
        """Test that every component lands in its field."""
        parsed = parse_url("https://user:pw@example.com:8443/a/b?x=1&y=2#frag")

        assert parsed == ParsedUrl(
            scheme="https",
            username="user",
            password="pw",
            host="example.com",
            port="8443",
            path="/a/b",
            query="x=1&y=2",
            fragment="frag",
            slashes=True,
        )

    def test_params_view(self):
        """Test the QueryParamList view of the query."""
        parsed = parse_url("http://a.com/?a=1&b=2")

        assert parsed.params == QueryParamList.parse("a=1&b=2")

    def test_scheme_and_host_are_lowercased(self):
        """Test the canonicalisation of scheme and host."""
        parsed = parse_url("HTTP://Example.COM/Path")

        assert parsed.scheme == "http"
        assert parsed.host == "example.com"
        assert parsed.path == "/Path"

    def test_default_port_is_dropped(self):
        """Test that the scheme's default port is not kept."""
        assert parse_url("http://a.com:80/").port == ""
        assert parse_url("https://a.com:443/").port == ""
        assert parse_url("https://a.com:80/").port == "80"

    def test_empty_path_becomes_slash(self):
        """Test that network URLs always have a path."""
        assert parse_url("http://a.com").path == "/"
        assert format_url(parse_url("http://a.com")) == "http://a.com/"

    def test_ipv6_host(self):
        """Test bracketed IPv6 literals."""
        parsed = parse_url("http://[::1]:8080/")

        assert parsed.host == "[::1]"
        assert parsed.port == "8080"

    def test_non_network_scheme(self):
        """Test that schemes without an authority parse."""
        parsed = parse_url("mailto:someone@example.com")

        assert parsed.scheme == "mailto"
        assert parsed.host == ""
        assert parsed.path == "someone@example.com"

    def test_surrounding_whitespace_is_ignored(self):
        """Test that leading/trailing spaces do not fail the parse."""
        assert parse_url("  http://a.com/  ").host == "a.com"

    @pytest.mark.parametrize(
        "text, reason",
        [
            ("", "empty string"),
            ("   ", "empty string"),
            ("not a url", "missing scheme"),
            ("/relative/path", "missing scheme"),
            ("http://", "missing host"),
            ("https:example.com", "missing host"),
            ("http://a.com:port/", "invalid port"),
            ("http://a.com:70000/", "out of range"),
            ("http://bad host.com/", "invalid host"),
        ],
    )
    def test_invalid_urls(self, text, reason):
        """Test that malformed text raises InvalidUrlError with a reason."""
        with pytest.raises(InvalidUrlError) as exc_info:
            parse_url(text)

        assert reason in exc_info.value.reason
        assert exc_info.value.text == text
        assert reason in str(exc_info.value)

    def test_unterminated_ipv6_is_invalid(self):
        """Test a malformed IPv6 literal."""
        with pytest.raises(InvalidUrlError):
            parse_url("http://[::1/")

    def test_invalid_url_error_is_a_value_error(self):
        """Test the exception hierarchy."""
        assert issubclass(InvalidUrlError, ValueError)


class TestFormatUrl:
    """Test formatting a ParsedUrl back to text."""

    @pytest.mark.parametrize(
        "text",
        [
            "http://a.com/",
            "https://example.com:8443/a/b?x=1&y=2#frag",
            "http://user:pw@host.com/",
            "http://user@host.com/path",
            "http://[::1]:8080/",
            "ftp://files.example.org/pub/",
            "file:///etc/hosts",
            "mailto:someone@example.com",
            "https://a.com/?tag=x&tag=y",
            "foo:///bar",
            "foo:////x",
            "foo://h/x",
        ],
    )
    def test_canonical_round_trip(self, text):
        """Test that format(parse(s)) == s for canonical URLs."""
        assert format_url(parse_url(text)) == text

    @pytest.mark.parametrize(
        "text",
        [
            "https://user:pw@example.com:8443/a?x=1#frag",
            "foo:///bar",
            "foo:////x",
            "mailto:someone@example.com",
        ],
    )
    def test_parse_inverts_format(self, text):
        """Test that parse(format(u)) == u for parsed values."""
        parsed = parse_url(text)

        assert parse_url(format_url(parsed)) == parsed

    def test_format_never_fails_on_raw_fields(self):
        """Test that unparseable field values are still formatted."""
        parsed = ParsedUrl(scheme="http", host="a.com", port="abc", path="/")

        assert format_url(parsed) == "http://a.com:abc/"

    def test_double_slash_path_keeps_empty_authority(self):
        """Test that a "//" path is not read back as a host."""
        parsed = ParsedUrl(scheme="foo", path="//x")

        assert format_url(parsed) == "foo:////x"
        assert parse_url(format_url(parsed)).host == ""
        assert parse_url(format_url(parsed)).path == "//x"

    def test_str_formats(self):
        """Test that str() of a ParsedUrl is its text."""
        assert str(parse_url("http://a.com/x")) == "http://a.com/x"


class TestSetField:
    """Test permissive field assignment."""

    def test_set_host(self):
        """Test replacing the host."""
        parsed = set_field(parse_url("http://a.com/"), "hostname", "b.com")

        assert format_url(parsed) == "http://b.com/"

    def test_set_returns_copy(self):
        """Test that the input ParsedUrl is untouched."""
        original = parse_url("http://a.com/")
        set_field(original, "host", "b.com")

        assert original.host == "a.com"

    def test_protocol_alias_strips_colon(self):
        """Test that 'https:' sets the scheme to 'https'."""
        parsed = set_field(parse_url("http://a.com/"), "protocol", "https:")

        assert parsed.scheme == "https"
        assert format_url(parsed) == "https://a.com/"

    def test_search_and_hash_aliases_strip_prefix(self):
        """Test the '?' and '#' decorations."""
        parsed = parse_url("http://a.com/")
        parsed = set_field(parsed, "search", "?a=1")
        parsed = set_field(parsed, "hash", "#top")

        assert parsed.query == "a=1"
        assert parsed.fragment == "top"
        assert format_url(parsed) == "http://a.com/?a=1#top"

    def test_clearing_search(self):
        """Test that an empty search removes the query."""
        parsed = set_field(parse_url("http://a.com/?a=1"), "search", "")

        assert format_url(parsed) == "http://a.com/"

    def test_invalid_port_is_stored_raw(self):
        """Test that no validation happens at assignment."""
        parsed = set_field(parse_url("http://a.com/"), "port", "abc")

        assert parsed.port == "abc"
        with pytest.raises(InvalidUrlError):
            parse_url(format_url(parsed))

    def test_pathname_gets_leading_slash(self):
        """Test that a relative path is anchored under the authority."""
        parsed = set_field(parse_url("http://a.com/"), "pathname", "docs")

        assert parsed.path == "/docs"

    def test_host_on_opaque_path_is_separated(self):
        """Test that adding a host does not merge it with the path."""
        parsed = set_field(parse_url("mailto:x"), "hostname", "h")

        assert format_url(parsed) == "mailto://h/x"
        assert parse_url(format_url(parsed)).host == "h"

    def test_unknown_field(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError):
            set_field(parse_url("http://a.com/"), "origin", "x")


class TestGetField:
    """Test the display projection of fields."""

    def test_location_style_display(self):
        """Test the decorations of protocol, search and hash."""
        parsed = parse_url("https://a.com:8443/p?x=1#top")

        assert get_field(parsed, "protocol") == "https:"
        assert get_field(parsed, "hostname") == "a.com"
        assert get_field(parsed, "port") == "8443"
        assert get_field(parsed, "search") == "?x=1"
        assert get_field(parsed, "hash") == "#top"

    def test_empty_search_and_hash(self):
        """Test that missing query/fragment display as empty strings."""
        parsed = parse_url("http://a.com/")

        assert get_field(parsed, "search") == ""
        assert get_field(parsed, "hash") == ""

    def test_get_inverts_set(self):
        """Test that setting a displayed value changes nothing."""
        parsed = parse_url("https://a.com:8443/p?x=1#top")
        for name in ("protocol", "hostname", "port", "search", "hash"):
            assert set_field(parsed, name, get_field(parsed, name)) == parsed
