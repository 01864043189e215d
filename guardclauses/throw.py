"""Default failure producers.

Every function here builds the default diagnostic for one precondition and
raises the matching violation. None of them return.
"""

from __future__ import annotations

from collections.abc import Iterable
from re import Pattern
from typing import NoReturn

from guardclauses.exceptions import (
    AbsoluteUriViolation,
    CollectionCountViolation,
    CustomCallbackMissingViolation,
    DefaultValueViolation,
    DifferentReferenceViolation,
    DuplicateItemViolation,
    EmptyCollectionViolation,
    EmptyStringViolation,
    EmptyUuidViolation,
    EnumValueUndefinedViolation,
    InvalidOperationViolation,
    InvalidStateViolation,
    InvalidUriSchemeViolation,
    IsASubstringViolation,
    ItemMissingViolation,
    ItemPresentViolation,
    NotAnEnumTypeViolation,
    NotASubstringViolation,
    NullableNoValueViolation,
    NullItemViolation,
    NullViolation,
    OutOfRangeViolation,
    RelativeUriViolation,
    SameReferenceViolation,
    StringMismatchViolation,
    SubstringMissingViolation,
    SubstringPresentViolation,
    TypeCastViolation,
    ValueIsOneOfViolation,
    ValueNotOneOfViolation,
    ValuesEqualViolation,
    ValuesNotEqualViolation,
    WhiteSpaceStringViolation,
)
from guardclauses.range import Range
from guardclauses.types import CT, ExceptionFactory, StringComparison


def _subject(parameter_name: str | None, noun: str) -> str:
    return parameter_name if parameter_name is not None else noun


def format_value(value: object) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, type):
        return value.__qualname__
    return str(value)


def format_items(items: Iterable[object]) -> str:
    return ",\n".join(format_value(item) for item in items)


def _mode(comparison_type: StringComparison | None) -> str:
    return "" if comparison_type is None else f" ({comparison_type.name})"


def argument_null(
    parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default NullViolation, using the optional parameter name and message."""
    raise NullViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must not be None.",
    )


def argument_default(
    parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default DefaultValueViolation, using the optional parameter name and message."""
    raise DefaultValueViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must not be the default value.",
    )


def nullable_has_no_value(
    parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default NullableNoValueViolation, using the optional parameter name and message."""
    raise NullableNoValueViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The optional value')} must have a value, "
        "but it actually is None.",
    )


def empty_uuid(
    parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default EmptyUuidViolation, using the optional parameter name and message."""
    raise EmptyUuidViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must be a valid UUID, "
        "but it actually is an empty one.",
    )


def invalid_type_cast(
    parameter: object,
    target_type: type,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default TypeCastViolation, using the optional parameter name and message."""
    raise TypeCastViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} {format_value(parameter)} "
        f"cannot be cast to {format_value(target_type)}.",
        value=parameter,
        target_type=target_type,
    )


def type_is_no_enum(
    parameter: object, parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default NotAnEnumTypeViolation, using the optional parameter name and message."""
    raise NotAnEnumTypeViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The type')} {format_value(parameter)} "
        "must be an enum type, but it actually is not.",
    )


def enum_value_not_defined(
    parameter: object,
    enum_type: type,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default EnumValueUndefinedViolation, using the optional parameter name and message."""
    raise EnumValueUndefinedViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} {format_value(parameter)} "
        f"must be one of the defined constants of enum {format_value(enum_type)}, "
        "but it actually is not.",
        value=parameter,
        enum_type=enum_type,
    )


def invalid_operation(message: str | None = None) -> NoReturn:
    """Raises an InvalidOperationViolation using the optional message."""
    raise InvalidOperationViolation(message)


def invalid_state(message: str | None = None) -> NoReturn:
    """Raises an InvalidStateViolation using the optional message."""
    raise InvalidStateViolation(message)


def _out_of_range(
    parameter: object,
    boundary: object,
    requirement: str,
    parameter_name: str | None,
    message: str | None,
) -> NoReturn:
    raise OutOfRangeViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} {requirement} {boundary}, "
        f"but it actually is {parameter}.",
        value=parameter,
        boundary=boundary,
    )


def must_be_less_than(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is not less than the boundary."""
    _out_of_range(parameter, boundary, "must be less than", parameter_name, message)


def must_not_be_less_than(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is less than the boundary."""
    _out_of_range(
        parameter, boundary, "must not be less than", parameter_name, message
    )


def must_be_less_than_or_equal_to(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is greater than the boundary."""
    _out_of_range(
        parameter,
        boundary,
        "must be less than or equal to",
        parameter_name,
        message,
    )


def must_not_be_less_than_or_equal_to(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is less than or equal to the boundary."""
    _out_of_range(
        parameter,
        boundary,
        "must not be less than or equal to",
        parameter_name,
        message,
    )


def must_be_greater_than(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is not greater than the boundary."""
    _out_of_range(
        parameter, boundary, "must be greater than", parameter_name, message
    )


def must_not_be_greater_than(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is greater than the boundary."""
    _out_of_range(
        parameter, boundary, "must not be greater than", parameter_name, message
    )


def must_be_greater_than_or_equal_to(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is less than the boundary."""
    _out_of_range(
        parameter,
        boundary,
        "must be greater than or equal to",
        parameter_name,
        message,
    )


def must_not_be_greater_than_or_equal_to(
    parameter: object,
    boundary: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value that is greater than or equal to the boundary."""
    _out_of_range(
        parameter,
        boundary,
        "must not be greater than or equal to",
        parameter_name,
        message,
    )


def must_be_in_range(
    parameter: object,
    range_: Range[CT],
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value outside of the range."""
    raise OutOfRangeViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must be {range_}, "
        f"but it actually is {parameter}.",
        value=parameter,
        boundary=range_,
    )


def must_not_be_in_range(
    parameter: object,
    range_: Range[CT],
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default OutOfRangeViolation for a value inside of the range."""
    raise OutOfRangeViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must not be {range_}, "
        f"but it actually is {parameter}.",
        value=parameter,
        boundary=range_,
    )


def values_not_equal(
    parameter: object,
    other: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default ValuesNotEqualViolation, using the optional parameter name and message."""
    raise ValuesNotEqualViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must be equal to "
        f"{format_value(other)}, but it actually is {format_value(parameter)}.",
        value=parameter,
        other=other,
    )


def values_equal(
    parameter: object,
    other: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default ValuesEqualViolation, using the optional parameter name and message."""
    raise ValuesEqualViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must not be equal to "
        f"{format_value(other)}, but it actually is {format_value(parameter)}.",
        value=parameter,
        other=other,
    )


def same_object_reference(
    parameter: object,
    other: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default SameReferenceViolation, using the optional parameter name and message."""
    raise SameReferenceViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The reference')} must not point to object "
        f"{format_value(parameter)}, but it actually does.",
        value=parameter,
        other=other,
    )


def different_object_reference(
    parameter: object,
    other: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default DifferentReferenceViolation, using the optional parameter name and message."""
    raise DifferentReferenceViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The reference')} must point to object "
        f"{format_value(other)}, but it actually points to "
        f"{format_value(parameter)}.",
        value=parameter,
        other=other,
    )


def empty_string(
    parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default EmptyStringViolation, using the optional parameter name and message."""
    raise EmptyStringViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must not be an empty string, "
        "but it actually is.",
    )


def white_space_string(
    parameter: str, parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default WhiteSpaceStringViolation, using the optional parameter name and message."""
    raise WhiteSpaceStringViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must not contain only "
        f"white space, but it actually is {format_value(parameter)}.",
    )


def string_does_not_match(
    parameter: str,
    pattern: Pattern[str],
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default StringMismatchViolation, using the optional parameter name and message."""
    raise StringMismatchViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must match the regular "
        f'expression "{pattern.pattern}", but it actually is '
        f"{format_value(parameter)}.",
    )


def string_does_not_contain(
    parameter: str | None,
    substring: str,
    comparison_type: StringComparison | None = None,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default SubstringMissingViolation, using the optional parameter name and message."""
    raise SubstringMissingViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must contain "
        f"{format_value(substring)}{_mode(comparison_type)}, "
        f"but it actually is {format_value(parameter)}.",
    )


def string_contains(
    parameter: str | None,
    substring: str,
    comparison_type: StringComparison | None = None,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default SubstringPresentViolation, using the optional parameter name and message."""
    raise SubstringPresentViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must not contain "
        f"{format_value(substring)} as a substring{_mode(comparison_type)}, "
        f"but it actually is {format_value(parameter)}.",
    )


def not_substring(
    parameter: str | None,
    other: str,
    comparison_type: StringComparison | None = None,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default NotASubstringViolation, using the optional parameter name and message."""
    raise NotASubstringViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must be a substring of "
        f"{format_value(other)}{_mode(comparison_type)}, "
        f"but it actually is {format_value(parameter)}.",
    )


def substring(
    parameter: str | None,
    other: str,
    comparison_type: StringComparison | None = None,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default IsASubstringViolation, using the optional parameter name and message."""
    raise IsASubstringViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The string')} must not be a substring of "
        f"{format_value(other)}{_mode(comparison_type)}, "
        f"but it actually is {format_value(parameter)}.",
    )


def empty_collection(
    parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default EmptyCollectionViolation, using the optional parameter name and message."""
    raise EmptyCollectionViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must not be an empty "
        "collection, but it actually is.",
    )


def invalid_collection_count(
    parameter: Iterable[object],
    count: int,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default CollectionCountViolation for a collection without the exact count."""
    raise CollectionCountViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must have count {count}, "
        f"but it actually has count {len(list(parameter))}.",
    )


def invalid_minimum_collection_count(
    parameter: Iterable[object],
    count: int,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default CollectionCountViolation for a collection with too few items."""
    raise CollectionCountViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must have at least count "
        f"{count}, but it actually has count {len(list(parameter))}.",
    )


def invalid_maximum_collection_count(
    parameter: Iterable[object],
    count: int,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default CollectionCountViolation for a collection with too many items."""
    raise CollectionCountViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must have at most count "
        f"{count}, but it actually has count {len(list(parameter))}.",
    )


def duplicate_item(
    parameter: Iterable[object],
    duplicate: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default DuplicateItemViolation, using the optional parameter name and message."""
    items = tuple(parameter)
    raise DuplicateItemViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must be a collection with "
        f"unique items, but {format_value(duplicate)} occurs more than once.\n"
        f"Actual content of the collection:\n{format_items(items)}",
        items=items,
        duplicate=duplicate,
    )


def null_item(
    parameter: Iterable[object],
    index: int,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default NullItemViolation, using the optional parameter name and message."""
    raise NullItemViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must be a collection not "
        f"containing None, but None was found at index {index}.\n"
        f"Actual content of the collection:\n{format_items(parameter)}",
        index=index,
    )


def missing_item(
    parameter: Iterable[object],
    item: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default ItemMissingViolation, using the optional parameter name and message."""
    raise ItemMissingViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must contain "
        f"{format_value(item)}, but it actually does not.\n"
        f"Actual content of the collection:\n{format_items(parameter)}",
        item=item,
    )


def existing_item(
    parameter: Iterable[object],
    item: object,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default ItemPresentViolation, using the optional parameter name and message."""
    raise ItemPresentViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The collection')} must not contain "
        f"{format_value(item)}, but it actually does.\n"
        f"Actual content of the collection:\n{format_items(parameter)}",
        item=item,
    )


def value_not_one_of(
    parameter: object,
    items: Iterable[object],
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default ValueNotOneOfViolation, using the optional parameter name and message."""
    allowed = tuple(items)
    raise ValueNotOneOfViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must be one of the following "
        f"items\n{format_items(allowed)}\n"
        f"but it actually is {format_value(parameter)}.",
        value=parameter,
        items=allowed,
    )


def value_is_one_of(
    parameter: object,
    items: Iterable[object],
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default ValueIsOneOfViolation, using the optional parameter name and message."""
    forbidden = tuple(items)
    raise ValueIsOneOfViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The value')} must not be one of the "
        f"following items\n{format_items(forbidden)}\n"
        f"but it actually is {format_value(parameter)}.",
        value=parameter,
        items=forbidden,
    )


def must_be_absolute_uri(
    parameter: object, parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default RelativeUriViolation, using the optional parameter name and message."""
    raise RelativeUriViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The URI')} must be an absolute URI, "
        f'but it actually is "{parameter}".',
    )


def must_be_relative_uri(
    parameter: object, parameter_name: str | None = None, message: str | None = None
) -> NoReturn:
    """Raises the default AbsoluteUriViolation, using the optional parameter name and message."""
    raise AbsoluteUriViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The URI')} must be a relative URI, "
        f'but it actually is "{parameter}".',
    )


def uri_must_have_scheme(
    parameter: object,
    scheme: str,
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default InvalidUriSchemeViolation for a single expected scheme."""
    raise InvalidUriSchemeViolation(
        parameter_name,
        message
        if message is not None
        else f'{_subject(parameter_name, "The URI")} must use the scheme "{scheme}", '
        f'but it actually is "{parameter}".',
        uri=parameter,
        schemes=(scheme,),
    )


def uri_must_have_one_scheme_of(
    parameter: object,
    schemes: Iterable[str],
    parameter_name: str | None = None,
    message: str | None = None,
) -> NoReturn:
    """Raises the default InvalidUriSchemeViolation for a set of expected schemes."""
    expected = tuple(schemes)
    raise InvalidUriSchemeViolation(
        parameter_name,
        message
        if message is not None
        else f"{_subject(parameter_name, 'The URI')} must use one of the following "
        f'schemes\n{format_items(expected)}\nbut it actually is "{parameter}".',
        uri=parameter,
        schemes=expected,
    )


def custom_exception(
    exception_factory: ExceptionFactory | None, *context: object
) -> NoReturn:
    """Raises the exception returned by exception_factory, passing the contextual values."""
    if exception_factory is None:
        raise CustomCallbackMissingViolation(
            "exception_factory", "exception_factory must not be None."
        )
    raise exception_factory(*context)
