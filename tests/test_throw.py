from __future__ import annotations

import re

import pytest

from guardclauses import throw
from guardclauses.exceptions import (
    CustomCallbackMissingViolation,
    DuplicateItemViolation,
    InvalidUriSchemeViolation,
    NullViolation,
    OutOfRangeViolation,
    StringMismatchViolation,
    SubstringMissingViolation,
    ValueNotOneOfViolation,
)
from guardclauses.range import Range
from guardclauses.types import StringComparison


def test_argument_null_message() -> None:
    with pytest.raises(NullViolation, match="^foo must not be None.$") as info:
        throw.argument_null("foo")
    assert info.value.parameter_name == "foo"


def test_argument_null_custom_message() -> None:
    with pytest.raises(NullViolation, match="^boom$"):
        throw.argument_null("foo", "boom")


def test_comparison_message_embeds_boundary_and_value() -> None:
    with pytest.raises(OutOfRangeViolation) as info:
        throw.must_be_greater_than_or_equal_to(1, 3, "count")
    assert str(info.value) == (
        "count must be greater than or equal to 3, but it actually is 1."
    )
    assert info.value.value == 1
    assert info.value.boundary == 3


def test_range_message() -> None:
    with pytest.raises(OutOfRangeViolation) as info:
        throw.must_be_in_range(11, Range(1, True, 10, False))
    assert str(info.value) == (
        "The value must be between 1 (inclusive) and 10 (exclusive), "
        "but it actually is 11."
    )


def test_value_not_one_of_lists_items() -> None:
    with pytest.raises(ValueNotOneOfViolation) as info:
        throw.value_not_one_of(5, [1, 2, 3], "v")
    assert str(info.value) == (
        "v must be one of the following items\n1,\n2,\n3\nbut it actually is 5."
    )
    assert info.value.items == (1, 2, 3)


def test_duplicate_item_records_duplicate() -> None:
    with pytest.raises(DuplicateItemViolation) as info:
        throw.duplicate_item(["a", "b", "a"], "a")
    assert info.value.duplicate == "a"
    assert 'but "a" occurs more than once' in str(info.value)


def test_string_messages_mention_comparison_mode() -> None:
    with pytest.raises(SubstringMissingViolation) as info:
        throw.string_does_not_contain(
            "abc", "X", StringComparison.ORDINAL_IGNORE_CASE, "text"
        )
    assert str(info.value) == (
        'text must contain "X" (ORDINAL_IGNORE_CASE), but it actually is "abc".'
    )


def test_string_does_not_match_shows_pattern() -> None:
    with pytest.raises(StringMismatchViolation, match=r'"\^\\d\+\$"'):
        throw.string_does_not_match("abc", re.compile(r"^\d+$"))


def test_uri_scheme_producers() -> None:
    with pytest.raises(InvalidUriSchemeViolation) as info:
        throw.uri_must_have_one_scheme_of("ftp://x", ["http", "https"], "url")
    assert info.value.schemes == ("http", "https")
    assert info.value.uri == "ftp://x"


def test_custom_exception_passes_context() -> None:
    class _Custom(Exception):
        pass

    with pytest.raises(_Custom, match="1-2-3"):
        throw.custom_exception(lambda a, b, c: _Custom(f"{a}-{b}-{c}"), 1, 2, 3)


def test_custom_exception_without_factory() -> None:
    with pytest.raises(CustomCallbackMissingViolation) as info:
        throw.custom_exception(None)
    assert info.value.parameter_name == "exception_factory"
    assert isinstance(info.value, NullViolation)


def test_empty_message_is_kept_as_given() -> None:
    with pytest.raises(NullViolation) as info:
        throw.argument_null("x", "")
    assert info.value.message == ""
    assert str(info.value) == str(NullViolation("x", ""))
    with pytest.raises(ValueNotOneOfViolation) as one_of:
        throw.value_not_one_of(5, (1, 2), "v", "")
    assert one_of.value.message == ""
