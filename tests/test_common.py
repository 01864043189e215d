from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from enum import Enum, IntEnum, IntFlag
from uuid import UUID, uuid4

import pytest

from guardclauses import (
    custom,
    invalid_operation,
    invalid_state,
    is_default,
    must_be_enum_type,
    must_be_of_type,
    must_be_same_as,
    must_be_valid_enum_value,
    must_have_value,
    must_not_be_default,
    must_not_be_empty_uuid,
    must_not_be_null,
    must_not_be_same_as,
)
from guardclauses.exceptions import (
    CustomCallbackMissingViolation,
    DefaultValueViolation,
    DifferentReferenceViolation,
    EmptyUuidViolation,
    EnumValueUndefinedViolation,
    InvalidOperationViolation,
    InvalidStateViolation,
    NotAnEnumTypeViolation,
    NullableNoValueViolation,
    NullViolation,
    SameReferenceViolation,
    TypeCastViolation,
)


class _Custom(Exception):
    pass


class Color(Enum):
    RED = 1
    GREEN = 2


class Level(IntEnum):
    NONE = 0
    HIGH = 1


class Perm(IntFlag):
    READ = 1
    WRITE = 2


def test_must_not_be_null_raises_with_parameter_name() -> None:
    with pytest.raises(NullViolation) as info:
        must_not_be_null(None, "x")
    assert info.value.parameter_name == "x"
    assert "x must not be None." in str(info.value)


def test_must_not_be_null_returns_value() -> None:
    value = "a"
    assert must_not_be_null(value) is value


def test_must_not_be_null_custom_factory_overrides_default() -> None:
    with pytest.raises(_Custom):
        must_not_be_null(None, lambda: _Custom())


def test_custom_factory_cannot_be_combined_with_message() -> None:
    with pytest.raises(TypeError):
        must_not_be_null(None, lambda: _Custom(), "message")


def test_must_not_be_null_custom_message() -> None:
    with pytest.raises(NullViolation, match="^custom$"):
        must_not_be_null(None, message="custom")


@pytest.mark.parametrize(
    "value",
    [None, 0, 0.0, False, "", b"", Decimal(0), UUID(int=0), Level.NONE],
)
def test_default_values(value: object) -> None:
    assert is_default(value)
    with pytest.raises(DefaultValueViolation):
        must_not_be_default(value, "value")


@pytest.mark.parametrize("value", [1, -0.5, True, "a", object(), Level.HIGH, []])
def test_non_default_values(value: object) -> None:
    assert must_not_be_default(value) is value


def test_must_have_value() -> None:
    assert must_have_value(0) == 0
    with pytest.raises(NullableNoValueViolation) as info:
        must_have_value(None, "maybe")
    assert str(info.value) == "maybe must have a value, but it actually is None."
    assert info.value.kind == "NULLABLE_NO_VALUE"


def test_must_not_be_empty_uuid() -> None:
    valid = uuid4()
    assert must_not_be_empty_uuid(valid) == valid
    with pytest.raises(EmptyUuidViolation) as info:
        must_not_be_empty_uuid(UUID(int=0), "id")
    assert info.value.parameter_name == "id"
    with pytest.raises(_Custom):
        must_not_be_empty_uuid(UUID(int=0), lambda: _Custom())


def test_identity_checks_use_identity_not_equality() -> None:
    first = [1, 2]
    equal_copy = [1, 2]
    assert must_not_be_same_as(first, equal_copy) is first
    with pytest.raises(SameReferenceViolation) as info:
        must_not_be_same_as(first, first, "first")
    assert info.value.value is first
    with pytest.raises(DifferentReferenceViolation):
        must_be_same_as(first, equal_copy)
    assert must_be_same_as(first, first) is first


def test_identity_custom_factory_receives_both_values() -> None:
    marker = object()
    with pytest.raises(_Custom) as info:
        must_not_be_same_as(marker, marker, lambda a, b: _Custom(a is b))
    assert info.value.args == (True,)


def test_must_be_of_type() -> None:
    assert must_be_of_type(3, int) == 3
    with pytest.raises(TypeCastViolation) as info:
        must_be_of_type("3", int, "number")
    assert info.value.target_type is int
    assert str(info.value) == 'number "3" cannot be cast to int.'
    with pytest.raises(NullViolation):
        must_be_of_type(None, int)


def test_must_be_enum_type() -> None:
    assert must_be_enum_type(Color) is Color
    with pytest.raises(NotAnEnumTypeViolation):
        must_be_enum_type(int, "t")


def test_must_be_valid_enum_value() -> None:
    assert must_be_valid_enum_value(Color.RED, Color) is Color.RED
    assert must_be_valid_enum_value(Perm.READ | Perm.WRITE, Perm) == 3
    with pytest.raises(EnumValueUndefinedViolation) as info:
        must_be_valid_enum_value(1, Color, "color")
    assert info.value.enum_type is Color
    with pytest.raises(EnumValueUndefinedViolation):
        must_be_valid_enum_value(Perm(8), Perm)
    with pytest.raises(NotAnEnumTypeViolation):
        loose: Callable[..., object] = must_be_valid_enum_value
        loose(1, int)


def test_invalid_operation_and_state() -> None:
    invalid_operation(False)
    invalid_state(False)
    with pytest.raises(InvalidOperationViolation, match="^not now$"):
        invalid_operation(True, "not now")
    with pytest.raises(InvalidStateViolation) as info:
        invalid_state(True, "broken")
    assert info.value.message == "broken"


def test_missing_custom_factory_is_reported_by_checks() -> None:
    factory: Callable[..., Exception] | None = None
    with pytest.raises(CustomCallbackMissingViolation) as info:
        must_not_be_null(None, custom(factory))
    assert info.value.parameter_name == "exception_factory"
    assert isinstance(info.value, NullViolation)
    with pytest.raises(CustomCallbackMissingViolation):
        must_be_of_type("3", int, custom(None))


def test_explicit_custom_factory_behaves_like_a_bare_factory() -> None:
    shared = object()
    assert must_not_be_null(1, custom(None)) == 1
    with pytest.raises(_Custom):
        must_not_be_same_as(shared, shared, custom(lambda a, b: _Custom()))
    with pytest.raises(TypeError, match="cannot be combined"):
        must_not_be_null(None, custom(lambda: _Custom()), "message")
