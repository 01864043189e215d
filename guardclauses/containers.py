"""Collection checks.

Membership and uniqueness checks are gated: when assertions are not compiled
in (see ``guardclauses.config``) they return their first argument without
evaluating anything.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sized
from functools import partial
from typing import TypeVar

from guardclauses import throw
from guardclauses.common import must_not_be_null
from guardclauses.failure import NameOrFactory, fail
from guardclauses.gating import gated

T = TypeVar("T")
C = TypeVar("C", bound=Collection[object])
S = TypeVar("S", bound=Sized)


def find_duplicate(items: Iterable[T]) -> tuple[bool, T | None]:
    """Return ``(True, item)`` for the first item that occurs twice.

    Pairwise comparison with ``==``, quadratic in the number of items. Items are
    never hashed, so unhashable items and hashable containers holding them
    (a tuple with a list inside) are supported.
    """
    seen: list[T] = []
    for item in items:
        for earlier in seen:
            if earlier == item:
                return True, item
        seen.append(item)
    return False, None


def must_not_be_null_or_empty(
    parameter: S | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> S:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter)
    if len(parameter) == 0:
        fail(parameter_name, message, throw.empty_collection, parameter)
    return parameter


def must_have_count(
    parameter: C | None,
    count: int,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, count)
    if len(parameter) != count:
        fail(
            parameter_name,
            message,
            partial(throw.invalid_collection_count, parameter, count),
            parameter,
            count,
        )
    return parameter


def must_have_minimum_count(
    parameter: C | None,
    count: int,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, count)
    if len(parameter) < count:
        fail(
            parameter_name,
            message,
            partial(throw.invalid_minimum_collection_count, parameter, count),
            parameter,
            count,
        )
    return parameter


def must_have_maximum_count(
    parameter: C | None,
    count: int,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, count)
    if len(parameter) > count:
        fail(
            parameter_name,
            message,
            partial(throw.invalid_maximum_collection_count, parameter, count),
            parameter,
            count,
        )
    return parameter


def must_not_contain_null(
    parameter: C | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter)
    for index, item in enumerate(parameter):
        if item is None:
            fail(
                parameter_name,
                message,
                partial(throw.null_item, parameter, index),
                parameter,
            )
    return parameter


@gated
def must_have_unique_items(
    parameter: C,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    """Ensure no two items are equal.

    An empty collection has unique items. Items are compared with their own
    equality, never by identity alone.
    """
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter)
    found, duplicate = find_duplicate(parameter)
    if found:
        fail(
            parameter_name,
            message,
            partial(throw.duplicate_item, parameter, duplicate),
            parameter,
        )
    return parameter


@gated
def must_contain(
    parameter: C,
    item: object,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, item)
    if item not in parameter:
        fail(
            parameter_name,
            message,
            partial(throw.missing_item, parameter, item),
            parameter,
            item,
        )
    return parameter


@gated
def must_not_contain(
    parameter: C,
    item: object,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> C:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, item)
    if item in parameter:
        fail(
            parameter_name,
            message,
            partial(throw.existing_item, parameter, item),
            parameter,
            item,
        )
    return parameter


@gated
def must_be_one_of(
    parameter: T,
    items: Collection[T],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    must_not_be_null(
        items,
        "items",
        "You called must_be_one_of wrongly by specifying items as None.",
    )
    if parameter not in items:
        fail(
            parameter_name,
            message,
            partial(throw.value_not_one_of, parameter, items),
            parameter,
            items,
        )
    return parameter


@gated
def must_not_be_one_of(
    parameter: T,
    items: Collection[T],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    must_not_be_null(
        items,
        "items",
        "You called must_not_be_one_of wrongly by specifying items as None.",
    )
    if parameter in items:
        fail(
            parameter_name,
            message,
            partial(throw.value_is_one_of, parameter, items),
            parameter,
            items,
        )
    return parameter
