"""String checks.

Checks that relate two strings accept an optional keyword-only
``comparison_type``. When it is given it is validated before anything else and
passed to a custom exception factory as the third contextual value.

A ``None`` needle (the substring to look for, or the string to look in) is a
misuse of the check and always raises ``NullViolation`` naming that argument,
even when a custom exception factory was supplied. A ``None`` inspected value
goes through the regular failure strategy.
"""

from __future__ import annotations

import re
import unicodedata as ud
from functools import partial
from re import Pattern

from guardclauses import throw
from guardclauses.common import must_be_valid_enum_value, must_not_be_null
from guardclauses.failure import NameOrFactory, fail
from guardclauses.types import StringComparison


def is_null_or_empty(value: str | None) -> bool:
    return value is None or value == ""


def is_null_or_white_space(value: str | None) -> bool:
    return value is None or value == "" or value.isspace()


def _fold(value: str, comparison_type: StringComparison) -> str:
    if comparison_type is StringComparison.ORDINAL:
        return value
    if comparison_type is StringComparison.ORDINAL_IGNORE_CASE:
        return value.casefold()
    if comparison_type is StringComparison.NORMALIZED:
        return ud.normalize("NFC", value)
    return ud.normalize("NFC", value.casefold())


def _mode(comparison_type: StringComparison | None) -> StringComparison:
    if comparison_type is None:
        return StringComparison.ORDINAL
    return must_be_valid_enum_value(
        comparison_type, StringComparison, "comparison_type"
    )


def _context(
    parameter: str | None, other: str, comparison_type: StringComparison | None
) -> tuple[object, ...]:
    if comparison_type is None:
        return (parameter, other)
    return (parameter, other, comparison_type)


def equals(
    first: str | None,
    second: str | None,
    comparison_type: StringComparison | None = None,
) -> bool:
    mode = _mode(comparison_type)
    if first is None or second is None:
        return first is second
    return _fold(first, mode) == _fold(second, mode)


def contains(
    string: str, value: str, comparison_type: StringComparison | None = None
) -> bool:
    mode = _mode(comparison_type)
    must_not_be_null(string, "string")
    must_not_be_null(value, "value")
    return _fold(value, mode) in _fold(string, mode)


def is_substring_of(
    value: str, other: str, comparison_type: StringComparison | None = None
) -> bool:
    return contains(other, value, comparison_type)


def must_not_be_null_or_empty(
    parameter: str | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> str:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter)
    if parameter == "":
        fail(parameter_name, message, throw.empty_string, parameter)
    return parameter


def must_not_be_null_or_white_space(
    parameter: str | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> str:
    checked = must_not_be_null_or_empty(parameter, parameter_name, message)
    if checked.isspace():
        fail(
            parameter_name,
            message,
            partial(throw.white_space_string, checked),
            checked,
        )
    return checked


def must_be(
    parameter: str | None,
    other: str | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
    *,
    comparison_type: StringComparison | None = None,
) -> str | None:
    if not equals(parameter, other, comparison_type):
        fail(
            parameter_name,
            message,
            partial(throw.values_not_equal, parameter, other),
            *_context(parameter, other, comparison_type),
        )
    return parameter


def must_not_be(
    parameter: str | None,
    other: str | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
    *,
    comparison_type: StringComparison | None = None,
) -> str | None:
    if equals(parameter, other, comparison_type):
        fail(
            parameter_name,
            message,
            partial(throw.values_equal, parameter, other),
            *_context(parameter, other, comparison_type),
        )
    return parameter


def must_match(
    parameter: str | None,
    pattern: Pattern[str] | str,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> str:
    """Ensure ``pattern`` finds a match anywhere in ``parameter``."""
    regex = re.compile(must_not_be_null(pattern, "pattern"))
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, regex)
    if regex.search(parameter) is None:
        fail(
            parameter_name,
            message,
            partial(throw.string_does_not_match, parameter, regex),
            parameter,
            regex,
        )
    return parameter


def must_contain(
    parameter: str | None,
    value: str,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
    *,
    comparison_type: StringComparison | None = None,
) -> str:
    mode = _mode(comparison_type)
    must_not_be_null(value, "value")
    context = _context(parameter, value, comparison_type)
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, *context)
    if _fold(value, mode) not in _fold(parameter, mode):
        fail(
            parameter_name,
            message,
            partial(throw.string_does_not_contain, parameter, value, comparison_type),
            *context,
        )
    return parameter


def must_not_contain(
    parameter: str | None,
    value: str,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
    *,
    comparison_type: StringComparison | None = None,
) -> str:
    mode = _mode(comparison_type)
    must_not_be_null(value, "value")
    context = _context(parameter, value, comparison_type)
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, *context)
    if _fold(value, mode) in _fold(parameter, mode):
        fail(
            parameter_name,
            message,
            partial(throw.string_contains, parameter, value, comparison_type),
            *context,
        )
    return parameter


def must_be_substring_of(
    parameter: str | None,
    value: str,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
    *,
    comparison_type: StringComparison | None = None,
) -> str:
    mode = _mode(comparison_type)
    must_not_be_null(value, "value")
    context = _context(parameter, value, comparison_type)
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, *context)
    if _fold(parameter, mode) not in _fold(value, mode):
        fail(
            parameter_name,
            message,
            partial(throw.not_substring, parameter, value, comparison_type),
            *context,
        )
    return parameter


def must_not_be_substring_of(
    parameter: str | None,
    value: str,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
    *,
    comparison_type: StringComparison | None = None,
) -> str:
    mode = _mode(comparison_type)
    must_not_be_null(value, "value")
    context = _context(parameter, value, comparison_type)
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, *context)
    if _fold(parameter, mode) in _fold(value, mode):
        fail(
            parameter_name,
            message,
            partial(throw.substring, parameter, value, comparison_type),
            *context,
        )
    return parameter
