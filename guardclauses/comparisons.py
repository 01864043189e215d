"""Comparison and range checks.

Ordering checks only use the value's own ``<`` and ``>`` operators. A custom
exception factory receives the value and the boundary (or range).
"""

from __future__ import annotations

from functools import partial
from typing import TypeVar

from guardclauses import throw
from guardclauses.failure import NameOrFactory, fail
from guardclauses.range import Range
from guardclauses.types import CT

T = TypeVar("T")


def must_be_less_than(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if not parameter < boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_be_less_than, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_not_be_less_than(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if parameter < boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_not_be_less_than, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_be_less_than_or_equal_to(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if parameter > boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_be_less_than_or_equal_to, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_not_be_less_than_or_equal_to(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if not parameter > boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_not_be_less_than_or_equal_to, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_be_greater_than(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if not parameter > boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_be_greater_than, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_not_be_greater_than(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if parameter > boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_not_be_greater_than, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_be_greater_than_or_equal_to(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if parameter < boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_be_greater_than_or_equal_to, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_not_be_greater_than_or_equal_to(
    parameter: CT,
    boundary: CT,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if not parameter < boundary:
        fail(
            parameter_name,
            message,
            partial(throw.must_not_be_greater_than_or_equal_to, parameter, boundary),
            parameter,
            boundary,
        )
    return parameter


def must_be_in(
    parameter: CT,
    range_: Range[CT],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if not range_.contains(parameter):
        fail(
            parameter_name,
            message,
            partial(throw.must_be_in_range, parameter, range_),
            parameter,
            range_,
        )
    return parameter


def must_not_be_in(
    parameter: CT,
    range_: Range[CT],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> CT:
    if range_.contains(parameter):
        fail(
            parameter_name,
            message,
            partial(throw.must_not_be_in_range, parameter, range_),
            parameter,
            range_,
        )
    return parameter


def must_be(
    parameter: T,
    other: object,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    """Ensure ``parameter == other`` using the value's own equality."""
    if not parameter == other:
        fail(
            parameter_name,
            message,
            partial(throw.values_not_equal, parameter, other),
            parameter,
            other,
        )
    return parameter


def must_not_be(
    parameter: T,
    other: object,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    if parameter == other:
        fail(
            parameter_name,
            message,
            partial(throw.values_equal, parameter, other),
            parameter,
            other,
        )
    return parameter
