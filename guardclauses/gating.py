"""Build-time gating of expensive checks.

The flag is read once, when this module is imported. A gated check that is
disabled is replaced by a function returning its first argument, so neither
the predicate nor any argument is ever looked at. The replacement accepts the
same call shapes as the check, including ``parameter=`` passed by keyword, so
call sites do not change between builds.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Concatenate, ParamSpec, TypeVar

from guardclauses.config import Settings

T = TypeVar("T")
P = ParamSpec("P")

Check = Callable[Concatenate[T, P], T]

INSPECTED = "parameter"

SETTINGS = Settings.from_env()


def assertions_enabled() -> bool:
    return SETTINGS.compile_assertions


def conditional(enabled: bool) -> Callable[[Check[T, P]], Check[T, P]]:
    def decorate(check: Check[T, P]) -> Check[T, P]:
        first = next(iter(inspect.signature(check).parameters), None)
        if first != INSPECTED:
            raise TypeError(
                f"gated check {check!r} must take its inspected value "
                f"as '{INSPECTED}', not {first!r}"
            )
        if enabled:
            return check

        @functools.wraps(check)
        def elided(parameter: T, *args: P.args, **kwargs: P.kwargs) -> T:
            return parameter

        return elided

    return decorate


gated = conditional(SETTINGS.compile_assertions)
