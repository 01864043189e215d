"""Presence, identity, type and state checks.

Every check returns the inspected value unchanged so calls can be chained or
assigned directly::

    self._name = must_not_be_null(name, "name")

The second argument is either the parameter name (optionally followed by a
message) or an exception factory that replaces the default failure.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from enum import Enum, Flag
from fractions import Fraction
from functools import partial
from typing import TypeVar
from uuid import UUID

from guardclauses import throw
from guardclauses.failure import NameOrFactory, fail

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_DEFAULT_VALUES: tuple[tuple[type, object], ...] = (
    (bool, False),
    (int, 0),
    (float, 0.0),
    (complex, 0j),
    (Decimal, Decimal(0)),
    (Fraction, Fraction(0)),
    (str, ""),
    (bytes, b""),
    (timedelta, timedelta(0)),
    (UUID, UUID(int=0)),
)


def is_default(value: object) -> bool:
    """Return True for None and for the zero value of the built-in scalar types."""
    if value is None:
        return True
    for value_type, default in _DEFAULT_VALUES:
        if isinstance(value, value_type):
            return value == default
    return False


def must_not_be_null(
    parameter: T | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null)
    return parameter


def must_not_be_default(
    parameter: T, parameter_name: NameOrFactory = None, message: str | None = None
) -> T:
    if is_default(parameter):
        fail(parameter_name, message, throw.argument_default)
    return parameter


def must_have_value(
    parameter: T | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    """Ensure an optional value is present; raises NullableNoValueViolation."""
    if parameter is None:
        fail(parameter_name, message, throw.nullable_has_no_value)
    return parameter


def must_not_be_empty_uuid(
    parameter: UUID | None,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> UUID:
    if parameter is None:
        fail(parameter_name, message, throw.argument_null)
    if parameter.int == 0:
        fail(parameter_name, message, throw.empty_uuid)
    return parameter


def must_not_be_same_as(
    parameter: T,
    other: object,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    """Ensure ``parameter`` and ``other`` are not the identical object.

    Identity, not equality: two equal but distinct lists pass.
    """
    if parameter is other:
        fail(
            parameter_name,
            message,
            partial(throw.same_object_reference, parameter, other),
            parameter,
            other,
        )
    return parameter


def must_be_same_as(
    parameter: T,
    other: object,
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    if parameter is not other:
        fail(
            parameter_name,
            message,
            partial(throw.different_object_reference, parameter, other),
            parameter,
            other,
        )
    return parameter


def must_be_of_type(
    parameter: object,
    target_type: type[T],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> T:
    """Ensure ``parameter`` is an instance of ``target_type`` and return it narrowed."""
    if parameter is None:
        fail(parameter_name, message, throw.argument_null, parameter, target_type)
    if not isinstance(parameter, target_type):
        fail(
            parameter_name,
            message,
            partial(throw.invalid_type_cast, parameter, target_type),
            parameter,
            target_type,
        )
    return parameter


def is_enum_type(value: object) -> bool:
    return isinstance(value, type) and issubclass(value, Enum)


def must_be_enum_type(
    parameter: type[T],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> type[T]:
    if not is_enum_type(parameter):
        fail(
            parameter_name,
            message,
            partial(throw.type_is_no_enum, parameter),
            parameter,
        )
    return parameter


def is_valid_enum_value(value: object, enum_type: type[Enum]) -> bool:
    """Return True when ``value`` is a member of ``enum_type``.

    Flag members built from bits that no defined member carries are rejected.
    """
    if not isinstance(value, enum_type):
        return False
    if isinstance(value, Flag):
        defined = 0
        for member in enum_type:
            defined |= member.value
        return value.value & ~defined == 0
    return True


def must_be_valid_enum_value(
    parameter: object,
    enum_type: type[E],
    parameter_name: NameOrFactory = None,
    message: str | None = None,
) -> E:
    must_be_enum_type(enum_type, "enum_type")
    if not is_valid_enum_value(parameter, enum_type):
        fail(
            parameter_name,
            message,
            partial(throw.enum_value_not_defined, parameter, enum_type),
            parameter,
            enum_type,
        )
    return must_be_of_type(parameter, enum_type)


def invalid_operation(condition: bool, message: str | None = None) -> None:
    """Raise InvalidOperationViolation when ``condition`` is true."""
    if condition:
        throw.invalid_operation(message)


def invalid_state(condition: bool, message: str | None = None) -> None:
    """Raise InvalidStateViolation when ``condition`` is true."""
    if condition:
        throw.invalid_state(message)
