from __future__ import annotations

import pytest

from guardclauses.exceptions import OutOfRangeViolation
from guardclauses.range import Range


@pytest.mark.parametrize("value", range(-2, 14))
def test_inclusive_range_contains_iff_between(value: int) -> None:
    r = Range(1, True, 10, True)
    assert r.contains(value) == (1 <= value <= 10)
    assert (value in r) == (1 <= value <= 10)


@pytest.mark.parametrize("value", range(-2, 14))
def test_exclusive_lower_bound(value: int) -> None:
    r = Range(1, False, 10, True)
    assert r.contains(value) == (1 < value <= 10)


def test_exclusive_upper_bound() -> None:
    r = Range.from_inclusive(0.0).to_exclusive(1.0)
    assert r.contains(0.0)
    assert r.contains(0.999)
    assert not r.contains(1.0)


def test_factories() -> None:
    assert Range.inclusive(1, 3) == Range(1, True, 3, True)
    assert Range.exclusive("a", "c") == Range("a", False, "c", False)
    assert Range.from_exclusive(2).to_inclusive(4) == Range(2, False, 4, True)


def test_single_point_range() -> None:
    assert Range.inclusive(5, 5).contains(5)
    assert not Range.exclusive(5, 5).contains(5)


def test_inverted_range_is_rejected_eagerly() -> None:
    with pytest.raises(OutOfRangeViolation) as info:
        Range(10, True, 1, True)
    assert info.value.parameter_name == "upper"
    assert info.value.value == 1
    assert info.value.boundary == 10


def test_str_describes_bounds() -> None:
    assert str(Range(1, True, 10, False)) == (
        "between 1 (inclusive) and 10 (exclusive)"
    )


def test_range_is_immutable() -> None:
    r = Range.inclusive(1, 2)
    with pytest.raises(AttributeError):
        setattr(r, "lower", 0)
