from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _flag(raw: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    """Library settings loaded from environment in a type-safe, framework-free way.

    ``compile_assertions`` is the gating flag for the expensive collection
    checks. When the variable is unset it follows ``__debug__``, so running
    under ``python -O`` strips gated checks.
    """

    compile_assertions: bool
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "GUARDCLAUSES_"
        compile_assertions = _flag(
            os.getenv(f"{prefix}COMPILE_ASSERTIONS", ""), __debug__
        )
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip() or "INFO"
        return Settings(compile_assertions=compile_assertions, log_level=log_level)
