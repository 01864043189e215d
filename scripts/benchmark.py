#!/usr/bin/env python
"""
Throughput comparison between guard clauses and hand-written checks.

Each case times a hand-written baseline against the public check, with a
parameter name and with custom exception factories of growing arity. Results
are emitted through structured logging (no print).
"""

from __future__ import annotations

import argparse
import timeit
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from guardclauses import (
    must_be_greater_than_or_equal_to,
    must_be_one_of,
    must_have_unique_items,
    must_not_be_null,
)
from guardclauses.config import Settings
from guardclauses.logging import get_logger, setup_logging

FIRST = 42
SECOND = 3
ITEMS = (1, 2, 3, 4, 5, 6, 7, 8)


@dataclass(frozen=True)
class Case:
    check: str
    variants: dict[str, Callable[[], object]]


def _baseline_greater_than_or_equal_to() -> int:
    if FIRST < SECOND:
        raise ValueError("FIRST")
    return FIRST


def _baseline_not_null() -> int:
    if FIRST is None:
        raise ValueError("FIRST")
    return FIRST


def _baseline_one_of() -> int:
    value = ITEMS[-1]
    if value not in ITEMS:
        raise ValueError("value")
    return value


def _baseline_unique() -> tuple[int, ...]:
    if len(set(ITEMS)) != len(ITEMS):
        raise ValueError("ITEMS")
    return ITEMS


CASES: tuple[Case, ...] = (
    Case(
        "must_be_greater_than_or_equal_to",
        {
            "baseline": _baseline_greater_than_or_equal_to,
            "parameter_name": lambda: must_be_greater_than_or_equal_to(
                FIRST, SECOND, "FIRST"
            ),
            "custom_factory": lambda: must_be_greater_than_or_equal_to(
                FIRST, SECOND, lambda *_: ValueError()
            ),
            "custom_two_args": lambda: must_be_greater_than_or_equal_to(
                FIRST, SECOND, lambda p, b: ValueError(f"{p} < {b}")
            ),
        },
    ),
    Case(
        "must_not_be_null",
        {
            "baseline": _baseline_not_null,
            "parameter_name": lambda: must_not_be_null(FIRST, "FIRST"),
        },
    ),
    Case(
        "must_be_one_of",
        {
            "baseline": _baseline_one_of,
            "parameter_name": lambda: must_be_one_of(ITEMS[-1], ITEMS, "value"),
        },
    ),
    Case(
        "must_have_unique_items",
        {
            "baseline": _baseline_unique,
            "parameter_name": lambda: must_have_unique_items(ITEMS, "ITEMS"),
        },
    ),
)


def measure(func: Callable[[], object], number: int) -> float:
    """Return elapsed milliseconds for ``number`` calls of ``func``."""
    return timeit.timeit(func, number=number) * 1000.0


def run(checks: Sequence[str], number: int) -> list[tuple[str, str, float]]:
    log = get_logger("guardclauses.benchmark")
    results: list[tuple[str, str, float]] = []
    for case in CASES:
        if checks and case.check not in checks:
            continue
        for variant, func in case.variants.items():
            elapsed = measure(func, number)
            results.append((case.check, variant, elapsed))
            log.info(
                "measured %s/%s",
                case.check,
                variant,
                extra={
                    "check": case.check,
                    "variant": variant,
                    "iterations": number,
                    "elapsed_ms": round(elapsed, 3),
                },
            )
    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--check", action="append", default=[])
    parser.add_argument("--number", type=int, default=100_000)
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    if not settings.compile_assertions:
        get_logger("guardclauses.benchmark").warning(
            "Gated checks are compiled out; their timings measure the no-op path."
        )
    run(args.check, args.number)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
