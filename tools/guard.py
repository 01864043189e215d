from __future__ import annotations

from collections.abc import Callable

from tools.guards import docstring_guard, producer_guard

Runner = Callable[[list[str]], int]

PRODUCER_FILES = ["guardclauses/throw.py"]
LIBRARY_ROOTS = ["guardclauses", "tools"]


def run_guards(producer_files: list[str], library_roots: list[str]) -> int:
    runs: list[tuple[Runner, list[str]]] = [
        (docstring_guard.run, producer_files),
        (producer_guard.run, library_roots),
    ]
    for runner, roots in runs:
        rc = runner(roots)
        if rc != 0:
            return rc
    return 0


def main() -> int:
    return run_guards(PRODUCER_FILES, LIBRARY_ROOTS)


if __name__ == "__main__":
    raise SystemExit(main())
