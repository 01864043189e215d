"""URI checks backed by ``httpx.URL``.

Checks accept either a string or an ``httpx.URL`` and return the argument
unchanged. Scheme comparison is case-insensitive. A string that ``httpx``
cannot parse fails the check it was passed to, with that check's violation.
"""

from __future__ import annotations

from collections.abc import Collection
from functools import partial
from typing import TypeVar

import httpx

from guardclauses import throw
from guardclauses.common import must_not_be_null
from guardclauses.failure import NameOrFactory, Producer, fail

U = TypeVar("U", str, httpx.URL)

HTTP_SCHEMES: tuple[str, ...] = ("http", "https")


def _parse(
    parameter: str | httpx.URL,
    parameter_name: NameOrFactory,
    message: str | None,
    producer: Producer,
    *context: object,
) -> httpx.URL:
    if isinstance(parameter, httpx.URL):
        return parameter
    try:
        return httpx.URL(parameter)
    except httpx.InvalidURL:
        fail(parameter_name, message, producer, *context)


def must_be_absolute_uri(
    parameter: U | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> U:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter)
    producer = partial(throw.must_be_absolute_uri, parameter)
    url = _parse(parameter, parameter_name, message, producer, parameter)
    if not url.is_absolute_url:
        fail(parameter_name, message, producer, parameter)
    return parameter


def must_be_relative_uri(
    parameter: U | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> U:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter)
    producer = partial(throw.must_be_relative_uri, parameter)
    url = _parse(parameter, parameter_name, message, producer, parameter)
    if not url.is_relative_url:
        fail(parameter_name, message, producer, parameter)
    return parameter


def must_have_scheme(
    parameter: U | None,
    scheme: str,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> U:
    """Ensure the URI uses ``scheme``. Relative URIs have no scheme and fail."""
    must_not_be_null(scheme, "scheme")
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, scheme)
    producer = partial(throw.uri_must_have_scheme, parameter, scheme)
    url = _parse(parameter, parameter_name, message, producer, parameter, scheme)
    if url.scheme != scheme.lower():
        fail(parameter_name, message, producer, parameter, scheme)
    return parameter


def must_have_one_scheme_of(
    parameter: U | None,
    schemes: Collection[str],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> U:
    must_not_be_null(schemes, "schemes")
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, schemes)
    producer = partial(throw.uri_must_have_one_scheme_of, parameter, schemes)
    url = _parse(parameter, parameter_name, message, producer, parameter, schemes)
    if url.scheme not in {scheme.lower() for scheme in schemes}:
        fail(parameter_name, message, producer, parameter, schemes)
    return parameter


def must_be_https_url(
    parameter: U | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> U:
    return must_have_scheme(parameter, "https", parameter_name, message)


def must_be_http_or_https_url(
    parameter: U | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> U:
    return must_have_one_scheme_of(parameter, HTTP_SCHEMES, parameter_name, message)
