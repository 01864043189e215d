"""Failure strategies shared by every check.

A check accepts either a parameter name (optionally with a message) or an
exception factory in the same argument slot. ``resolve`` turns that slot into
one of two strategies and ``fail`` raises accordingly.

A bare ``None`` in the slot means "no name". To request a custom failure from
a factory that may be missing, wrap it with ``custom``: a ``None`` factory is
then reported as ``CustomCallbackMissingViolation`` instead of falling back to
the default failure.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from guardclauses import throw
from guardclauses.types import ExceptionFactory

Producer = Callable[[str | None, str | None], NoReturn]


@dataclass(frozen=True)
class DefaultFailure:
    parameter_name: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class CustomFailure:
    exception_factory: ExceptionFactory | None


FailureStrategy = DefaultFailure | CustomFailure

NameOrFactory = str | ExceptionFactory | CustomFailure | None


def custom(exception_factory: ExceptionFactory | None) -> CustomFailure:
    """Explicitly request the custom failure built by ``exception_factory``."""
    return CustomFailure(exception_factory)


def resolve(target: NameOrFactory, message: str | None = None) -> FailureStrategy:
    if target is None or isinstance(target, str):
        return DefaultFailure(target, message)
    if isinstance(target, CustomFailure):
        strategy = target
    elif callable(target):
        strategy = CustomFailure(target)
    else:
        raise TypeError(
            "parameter_name must be a string or an exception factory, "
            f"not {type(target).__name__}"
        )
    if message is not None:
        raise TypeError("message cannot be combined with a custom exception factory")
    return strategy


def fail(
    target: NameOrFactory,
    message: str | None,
    producer: Producer,
    *context: object,
) -> NoReturn:
    """Raise the failure selected by ``target``.

    The default strategy calls ``producer(parameter_name, message)``. The custom
    strategy calls the factory with ``context`` and raises whatever it returns.
    """
    strategy = resolve(target, message)
    if isinstance(strategy, CustomFailure):
        throw.custom_exception(strategy.exception_factory, *context)
    producer(strategy.parameter_name, strategy.message)
