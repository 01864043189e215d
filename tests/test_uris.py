from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from guardclauses import uris
from guardclauses.exceptions import (
    AbsoluteUriViolation,
    InvalidUriSchemeViolation,
    NullViolation,
    RelativeUriViolation,
)


class _Custom(Exception):
    pass


def test_absolute_uri() -> None:
    assert uris.must_be_absolute_uri("https://example.com/a") == "https://example.com/a"
    url = httpx.URL("ftp://files.example.com")
    assert uris.must_be_absolute_uri(url) is url
    with pytest.raises(RelativeUriViolation) as info:
        uris.must_be_absolute_uri("/api/v1", "endpoint")
    assert info.value.kind == "RELATIVE_URI"
    assert str(info.value) == (
        'endpoint must be an absolute URI, but it actually is "/api/v1".'
    )


def test_relative_uri() -> None:
    assert uris.must_be_relative_uri("docs/index.html") == "docs/index.html"
    with pytest.raises(AbsoluteUriViolation) as info:
        uris.must_be_relative_uri("http://example.com")
    assert info.value.kind == "ABSOLUTE_URI"


def test_null_uri() -> None:
    with pytest.raises(NullViolation):
        uris.must_be_absolute_uri(None, "uri")
    with pytest.raises(_Custom):
        uris.must_be_relative_uri(None, lambda u: _Custom(u))


def test_scheme_is_case_insensitive() -> None:
    assert uris.must_have_scheme("HTTPS://example.com", "https")
    assert uris.must_have_scheme("https://example.com", "HTTPS")
    assert uris.must_be_https_url("https://example.com") == "https://example.com"


def test_wrong_scheme() -> None:
    with pytest.raises(InvalidUriSchemeViolation) as info:
        uris.must_be_https_url("http://example.com", "url")
    assert info.value.schemes == ("https",)
    assert info.value.uri == "http://example.com"
    assert 'must use the scheme "https"' in str(info.value)


def test_relative_uri_has_no_scheme() -> None:
    with pytest.raises(InvalidUriSchemeViolation):
        uris.must_have_scheme("/relative/path", "https")


def test_one_scheme_of() -> None:
    assert uris.must_be_http_or_https_url("http://example.com") == "http://example.com"
    assert uris.must_have_one_scheme_of("ws://example.com", ["WS", "wss"])
    with pytest.raises(InvalidUriSchemeViolation) as info:
        uris.must_be_http_or_https_url("ftp://example.com")
    assert info.value.schemes == ("http", "https")


def test_scheme_custom_factory_receives_uri_and_schemes() -> None:
    schemes = ["wss"]
    with pytest.raises(_Custom) as info:
        uris.must_have_one_scheme_of("ws://x.org", schemes, lambda u, s: _Custom(u, s))
    assert info.value.args == ("ws://x.org", schemes)


def test_scheme_argument_must_not_be_null() -> None:
    with pytest.raises(NullViolation) as info:
        has_scheme: Callable[..., object] = uris.must_have_scheme
        has_scheme("https://x.org", None)
    assert info.value.parameter_name == "scheme"


@pytest.mark.parametrize("raw", ["http://[::1", "http://example.com:abc"])
def test_unparsable_uri_fails_the_check(raw: str) -> None:
    with pytest.raises(RelativeUriViolation) as absolute:
        uris.must_be_absolute_uri(raw, "uri")
    assert absolute.value.parameter_name == "uri"
    assert isinstance(absolute.value.__context__, httpx.InvalidURL)
    with pytest.raises(AbsoluteUriViolation):
        uris.must_be_relative_uri(raw)
    with pytest.raises(InvalidUriSchemeViolation) as scheme:
        uris.must_be_https_url(raw)
    assert scheme.value.uri == raw
    with pytest.raises(InvalidUriSchemeViolation):
        uris.must_be_http_or_https_url(raw)


def test_unparsable_uri_uses_custom_factory() -> None:
    with pytest.raises(_Custom) as info:
        uris.must_be_absolute_uri("http://[::1", lambda u: _Custom(u))
    assert info.value.args == ("http://[::1",)
