"""Guard clauses for function arguments and object state.

Checks return the inspected value on success and raise a typed
``PreconditionViolation`` on failure. Pass an exception factory in place of
the parameter name (or ``custom(factory)`` when the factory may be ``None``)
to raise your own exception instead. String checks live in
``guardclauses.strings`` because several of them share names with the
collection and comparison checks exported here.
"""

from guardclauses import strings, uris
from guardclauses.common import (
    invalid_operation,
    invalid_state,
    is_default,
    is_enum_type,
    is_valid_enum_value,
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
from guardclauses.comparisons import (
    must_be,
    must_be_greater_than,
    must_be_greater_than_or_equal_to,
    must_be_in,
    must_be_less_than,
    must_be_less_than_or_equal_to,
    must_not_be,
    must_not_be_greater_than,
    must_not_be_greater_than_or_equal_to,
    must_not_be_in,
    must_not_be_less_than,
    must_not_be_less_than_or_equal_to,
)
from guardclauses.containers import (
    must_be_one_of,
    must_contain,
    must_have_count,
    must_have_maximum_count,
    must_have_minimum_count,
    must_have_unique_items,
    must_not_be_null_or_empty,
    must_not_be_one_of,
    must_not_contain,
    must_not_contain_null,
)
from guardclauses.exceptions import (
    AbsoluteUriViolation,
    ArgumentViolation,
    CollectionCountViolation,
    CollectionViolation,
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
    PreconditionViolation,
    RelativeUriViolation,
    SameReferenceViolation,
    StringMismatchViolation,
    StringViolation,
    SubstringMissingViolation,
    SubstringPresentViolation,
    SubstringViolation,
    TypeCastViolation,
    UriViolation,
    ValueIsOneOfViolation,
    ValueNotOneOfViolation,
    ValuesEqualViolation,
    ValuesNotEqualViolation,
    ViolationKind,
    WhiteSpaceStringViolation,
    is_violation_kind,
)
from guardclauses.failure import custom
from guardclauses.range import Range
from guardclauses.types import StringComparison

__all__ = [
    "AbsoluteUriViolation",
    "ArgumentViolation",
    "CollectionCountViolation",
    "CollectionViolation",
    "CustomCallbackMissingViolation",
    "DefaultValueViolation",
    "DifferentReferenceViolation",
    "DuplicateItemViolation",
    "EmptyCollectionViolation",
    "EmptyStringViolation",
    "EmptyUuidViolation",
    "EnumValueUndefinedViolation",
    "InvalidOperationViolation",
    "InvalidStateViolation",
    "InvalidUriSchemeViolation",
    "IsASubstringViolation",
    "ItemMissingViolation",
    "ItemPresentViolation",
    "NotASubstringViolation",
    "NotAnEnumTypeViolation",
    "NullItemViolation",
    "NullViolation",
    "NullableNoValueViolation",
    "OutOfRangeViolation",
    "PreconditionViolation",
    "Range",
    "RelativeUriViolation",
    "SameReferenceViolation",
    "StringComparison",
    "StringMismatchViolation",
    "StringViolation",
    "SubstringMissingViolation",
    "SubstringPresentViolation",
    "SubstringViolation",
    "TypeCastViolation",
    "UriViolation",
    "ValueIsOneOfViolation",
    "ValueNotOneOfViolation",
    "ValuesEqualViolation",
    "ValuesNotEqualViolation",
    "ViolationKind",
    "WhiteSpaceStringViolation",
    "custom",
    "invalid_operation",
    "invalid_state",
    "is_default",
    "is_enum_type",
    "is_valid_enum_value",
    "is_violation_kind",
    "must_be",
    "must_be_enum_type",
    "must_be_greater_than",
    "must_be_greater_than_or_equal_to",
    "must_be_in",
    "must_be_less_than",
    "must_be_less_than_or_equal_to",
    "must_be_of_type",
    "must_be_one_of",
    "must_be_same_as",
    "must_be_valid_enum_value",
    "must_contain",
    "must_have_count",
    "must_have_maximum_count",
    "must_have_minimum_count",
    "must_have_unique_items",
    "must_have_value",
    "must_not_be",
    "must_not_be_default",
    "must_not_be_empty_uuid",
    "must_not_be_greater_than",
    "must_not_be_greater_than_or_equal_to",
    "must_not_be_in",
    "must_not_be_less_than",
    "must_not_be_less_than_or_equal_to",
    "must_not_be_null",
    "must_not_be_null_or_empty",
    "must_not_be_one_of",
    "must_not_be_same_as",
    "must_not_contain",
    "must_not_contain_null",
    "strings",
    "uris",
]
