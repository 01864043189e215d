from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from guardclauses.exceptions import OutOfRangeViolation
from guardclauses.types import CT


def _describe_bound(value: object, inclusive: bool) -> str:
    return f"{value} ({'inclusive' if inclusive else 'exclusive'})"


@dataclass(frozen=True)
class Range(Generic[CT]):
    """Closed or open interval over a totally ordered type.

    Bounds are validated eagerly: a lower bound greater than the upper bound
    raises ``OutOfRangeViolation`` at construction.
    """

    lower: CT
    lower_inclusive: bool
    upper: CT
    upper_inclusive: bool

    def __post_init__(self) -> None:
        if self.upper < self.lower:
            raise OutOfRangeViolation(
                "upper",
                f"upper must not be less than {self.lower}, "
                f"but it actually is {self.upper}.",
                value=self.upper,
                boundary=self.lower,
            )

    @classmethod
    def inclusive(cls, lower: CT, upper: CT) -> Range[CT]:
        return cls(lower, True, upper, True)

    @classmethod
    def exclusive(cls, lower: CT, upper: CT) -> Range[CT]:
        return cls(lower, False, upper, False)

    @staticmethod
    def from_inclusive(lower: CT) -> RangeBuilder[CT]:
        return RangeBuilder(lower, True)

    @staticmethod
    def from_exclusive(lower: CT) -> RangeBuilder[CT]:
        return RangeBuilder(lower, False)

    def contains(self, value: CT) -> bool:
        above = value >= self.lower if self.lower_inclusive else value > self.lower
        if not above:
            return False
        return value <= self.upper if self.upper_inclusive else value < self.upper

    def __contains__(self, value: CT) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return (
            f"between {_describe_bound(self.lower, self.lower_inclusive)} "
            f"and {_describe_bound(self.upper, self.upper_inclusive)}"
        )


@dataclass(frozen=True)
class RangeBuilder(Generic[CT]):
    """Half-built range holding only the lower bound."""

    lower: CT
    lower_inclusive: bool

    def to_inclusive(self, upper: CT) -> Range[CT]:
        return Range(self.lower, self.lower_inclusive, upper, True)

    def to_exclusive(self, upper: CT) -> Range[CT]:
        return Range(self.lower, self.lower_inclusive, upper, False)
