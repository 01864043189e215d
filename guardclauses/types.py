from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Protocol, TypeVar

ExceptionFactory = Callable[..., BaseException]

CT = TypeVar("CT", bound="Comparable")


class Comparable(Protocol):
    """Protocol for values with a total order expressed through rich comparisons."""

    def __lt__(self: CT, other: CT, /) -> bool: ...

    def __le__(self: CT, other: CT, /) -> bool: ...

    def __gt__(self: CT, other: CT, /) -> bool: ...

    def __ge__(self: CT, other: CT, /) -> bool: ...


class StringComparison(Enum):
    """How two strings are compared by the string checks.

    ``NORMALIZED`` modes compare the NFC normal form, so composed and decomposed
    spellings of the same character are treated as equal.
    """

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"
    NORMALIZED = "normalized"
    NORMALIZED_IGNORE_CASE = "normalized_ignore_case"
