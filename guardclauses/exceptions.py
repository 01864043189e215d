from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar, Literal, TypeGuard, get_args

ViolationKind = Literal[
    "NULL",
    "DEFAULT_VALUE",
    "NULLABLE_NO_VALUE",
    "EMPTY_UUID",
    "OUT_OF_RANGE",
    "VALUES_NOT_EQUAL",
    "VALUES_EQUAL",
    "EMPTY_STRING",
    "WHITE_SPACE_STRING",
    "STRING_MISMATCH",
    "SUBSTRING_MISSING",
    "SUBSTRING_PRESENT",
    "NOT_A_SUBSTRING",
    "IS_A_SUBSTRING",
    "EMPTY_COLLECTION",
    "INVALID_COLLECTION_COUNT",
    "DUPLICATE_ITEM",
    "NULL_ITEM",
    "ITEM_MISSING",
    "ITEM_PRESENT",
    "VALUE_NOT_ONE_OF",
    "VALUE_IS_ONE_OF",
    "NOT_AN_ENUM_TYPE",
    "ENUM_VALUE_UNDEFINED",
    "SAME_REFERENCE",
    "DIFFERENT_REFERENCE",
    "INVALID_TYPE_CAST",
    "RELATIVE_URI",
    "ABSOLUTE_URI",
    "INVALID_URI_SCHEME",
    "INVALID_OPERATION",
    "INVALID_STATE",
    "CUSTOM_CALLBACK_MISSING",
]


def is_violation_kind(value: str) -> TypeGuard[ViolationKind]:
    return value in get_args(ViolationKind)


def _restore(
    cls: type[PreconditionViolation], message: str, state: dict[str, object]
) -> PreconditionViolation:
    exc = cls.__new__(cls)
    Exception.__init__(exc, message)
    exc.__dict__.update(state)
    return exc


class PreconditionViolation(Exception):
    """Root of every failure raised by a guard clause.

    Each subclass names exactly one violated precondition through ``kind`` so
    handlers can branch on the kind without inspecting the message. When no
    message is passed, the class template is used: the parameter name (or the
    category noun) followed by the requirement.
    """

    kind: ClassVar[ViolationKind]
    noun: ClassVar[str] = "The value"
    requirement: ClassVar[str] = "is invalid"

    def __init__(
        self, parameter_name: str | None = None, message: str | None = None
    ) -> None:
        text = message if message is not None else self.default_message(parameter_name)
        super().__init__(text)
        self.parameter_name = parameter_name
        self.message = text

    @classmethod
    def default_message(cls, parameter_name: str | None = None) -> str:
        subject = parameter_name if parameter_name is not None else cls.noun
        return f"{subject} {cls.requirement}."

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return (_restore, (type(self), self.message, dict(self.__dict__)))


class ArgumentViolation(PreconditionViolation, ValueError):
    """A precondition on a single argument does not hold."""


class NullViolation(ArgumentViolation):
    kind = "NULL"
    requirement = "must not be None"


class CustomCallbackMissingViolation(NullViolation):
    """Raised when a custom failure callback was requested but is ``None``."""

    kind = "CUSTOM_CALLBACK_MISSING"
    noun = "The exception factory"


class DefaultValueViolation(ArgumentViolation):
    kind = "DEFAULT_VALUE"
    requirement = "must not be the default value"


class NullableNoValueViolation(ArgumentViolation):
    kind = "NULLABLE_NO_VALUE"
    noun = "The optional value"
    requirement = "must have a value, but it actually is None"


class EmptyUuidViolation(ArgumentViolation):
    kind = "EMPTY_UUID"
    requirement = "must be a valid UUID, but it actually is an empty one"


class OutOfRangeViolation(ArgumentViolation):
    """A comparable value lies on the wrong side of a boundary or range.

    ``boundary`` holds either the single compared value or the ``Range``.
    """

    kind = "OUT_OF_RANGE"
    requirement = "is out of range"

    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        value: object = None,
        boundary: object = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.value = value
        self.boundary = boundary


class _ValuePairViolation(ArgumentViolation):
    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        value: object = None,
        other: object = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.value = value
        self.other = other


class ValuesNotEqualViolation(_ValuePairViolation):
    kind = "VALUES_NOT_EQUAL"
    requirement = "must be equal to the other value"


class ValuesEqualViolation(_ValuePairViolation):
    kind = "VALUES_EQUAL"
    requirement = "must not be equal to the other value"


class SameReferenceViolation(_ValuePairViolation):
    kind = "SAME_REFERENCE"
    noun = "The reference"
    requirement = "must not point to the same object"


class DifferentReferenceViolation(_ValuePairViolation):
    kind = "DIFFERENT_REFERENCE"
    noun = "The reference"
    requirement = "must point to the same object"


class StringViolation(ArgumentViolation):
    noun = "The string"


class EmptyStringViolation(StringViolation):
    kind = "EMPTY_STRING"
    requirement = "must not be an empty string, but it actually is"


class WhiteSpaceStringViolation(StringViolation):
    kind = "WHITE_SPACE_STRING"
    requirement = "must not contain only white space"


class StringMismatchViolation(StringViolation):
    kind = "STRING_MISMATCH"
    requirement = "must match the regular expression"


class SubstringViolation(StringViolation):
    """Base for the four containment relations between two strings."""


class SubstringMissingViolation(SubstringViolation):
    kind = "SUBSTRING_MISSING"
    requirement = "must contain the given substring"


class SubstringPresentViolation(SubstringViolation):
    kind = "SUBSTRING_PRESENT"
    requirement = "must not contain the given substring"


class NotASubstringViolation(SubstringViolation):
    kind = "NOT_A_SUBSTRING"
    requirement = "must be a substring of the given string"


class IsASubstringViolation(SubstringViolation):
    kind = "IS_A_SUBSTRING"
    requirement = "must not be a substring of the given string"


class CollectionViolation(ArgumentViolation):
    noun = "The collection"


class EmptyCollectionViolation(CollectionViolation):
    kind = "EMPTY_COLLECTION"
    requirement = "must not be an empty collection, but it actually is"


class CollectionCountViolation(CollectionViolation):
    kind = "INVALID_COLLECTION_COUNT"
    requirement = "has an invalid number of items"


class DuplicateItemViolation(CollectionViolation):
    kind = "DUPLICATE_ITEM"
    requirement = "must be a collection with unique items"

    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        items: Iterable[object] = (),
        duplicate: object = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.items = tuple(items)
        self.duplicate = duplicate


class NullItemViolation(CollectionViolation):
    kind = "NULL_ITEM"
    requirement = "must be a collection not containing None"

    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        index: int | None = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.index = index


class _ItemViolation(CollectionViolation):
    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        item: object = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.item = item


class ItemMissingViolation(_ItemViolation):
    kind = "ITEM_MISSING"
    requirement = "must contain the given item"


class ItemPresentViolation(_ItemViolation):
    kind = "ITEM_PRESENT"
    requirement = "must not contain the given item"


class _OneOfViolation(ArgumentViolation):
    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        value: object = None,
        items: Iterable[object] = (),
    ) -> None:
        super().__init__(parameter_name, message)
        self.value = value
        self.items = tuple(items)


class ValueNotOneOfViolation(_OneOfViolation):
    kind = "VALUE_NOT_ONE_OF"
    requirement = "must be one of the allowed items"


class ValueIsOneOfViolation(_OneOfViolation):
    kind = "VALUE_IS_ONE_OF"
    requirement = "must not be one of the given items"


class NotAnEnumTypeViolation(ArgumentViolation, TypeError):
    kind = "NOT_AN_ENUM_TYPE"
    noun = "The type"
    requirement = "must be an enum type, but it actually is not"


class EnumValueUndefinedViolation(ArgumentViolation):
    kind = "ENUM_VALUE_UNDEFINED"
    requirement = "must be one of the defined constants of its enum"

    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        value: object = None,
        enum_type: type | None = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.value = value
        self.enum_type = enum_type


class TypeCastViolation(ArgumentViolation, TypeError):
    kind = "INVALID_TYPE_CAST"
    requirement = "cannot be cast to the target type"

    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        value: object = None,
        target_type: type | None = None,
    ) -> None:
        super().__init__(parameter_name, message)
        self.value = value
        self.target_type = target_type


class UriViolation(ArgumentViolation):
    noun = "The URI"


class RelativeUriViolation(UriViolation):
    """An absolute URI was expected but a relative one was passed."""

    kind = "RELATIVE_URI"
    requirement = "must be an absolute URI"


class AbsoluteUriViolation(UriViolation):
    """A relative URI was expected but an absolute one was passed."""

    kind = "ABSOLUTE_URI"
    requirement = "must be a relative URI"


class InvalidUriSchemeViolation(UriViolation):
    kind = "INVALID_URI_SCHEME"
    requirement = "uses an unexpected scheme"

    def __init__(
        self,
        parameter_name: str | None = None,
        message: str | None = None,
        *,
        uri: object = None,
        schemes: Iterable[str] = (),
    ) -> None:
        super().__init__(parameter_name, message)
        self.uri = uri
        self.schemes = tuple(schemes)


class InvalidOperationViolation(PreconditionViolation, RuntimeError):
    """The object is not in a state that permits the requested operation."""

    kind = "INVALID_OPERATION"
    noun = "The operation"
    requirement = "is invalid for the current state of the object"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(None, message)


class InvalidStateViolation(InvalidOperationViolation):
    kind = "INVALID_STATE"
    noun = "The object"
    requirement = "is in an invalid state"
