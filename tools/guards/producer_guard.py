"""Enforce the contracts of the library's own modules.

- Failure producers (``throw.py``) are annotated ``-> NoReturn`` and raise.
- Library modules never print or log; only ``guardclauses/logging.py`` may
  touch the logging package.
- No bare ``except`` and no handler that neither re-raises nor calls ``fail``.
"""

from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from pathlib import Path

PRODUCER_MODULE = "throw.py"
LOGGING_MODULE = "logging.py"
# Handlers may route the error into a violation instead of re-raising it.
HANDLER_ESCAPES = {"fail"}


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
        elif base.is_dir():
            yield from base.rglob("*.py")


def _returns_noreturn(node: ast.FunctionDef) -> bool:
    ann = node.returns
    if isinstance(ann, ast.Name):
        return ann.id == "NoReturn"
    if isinstance(ann, ast.Attribute):
        return ann.attr == "NoReturn"
    if isinstance(ann, ast.Constant):
        return ann.value == "NoReturn"
    return False


def _has_raise(node: ast.AST) -> bool:
    return any(isinstance(n, ast.Raise) for n in ast.walk(node))


def _calls_any(node: ast.AST, names: set[str]) -> bool:
    return any(
        isinstance(n, ast.Call) and isinstance(n.func, ast.Name) and n.func.id in names
        for n in ast.walk(node)
    )


def _producer_errors(path: Path, tree: ast.Module) -> list[str]:
    functions = [node for node in tree.body if isinstance(node, ast.FunctionDef)]
    halting = {node.name for node in functions if _returns_noreturn(node)}
    errors: list[str] = []
    for node in functions:
        if node.name.startswith(("_", "format_")):
            continue
        if node.name not in halting:
            errors.append(
                f"{path}:{node.lineno} producer '{node.name}' must return NoReturn"
            )
        if not _has_raise(node) and not _calls_any(node, halting - {node.name}):
            errors.append(f"{path}:{node.lineno} producer '{node.name}' never raises")
    return errors


def _logging_errors(path: Path, tree: ast.Module) -> list[str]:
    errors: list[str] = []
    for n in ast.walk(tree):
        if isinstance(n, ast.Call) and isinstance(n.func, ast.Name) and n.func.id == "print":
            errors.append(f"{path}:{n.lineno} checks must not print")
        if isinstance(n, ast.Import) and any(a.name == "logging" for a in n.names):
            errors.append(f"{path}:{n.lineno} checks must not log")
        if isinstance(n, ast.ImportFrom) and n.module in ("logging", "guardclauses.logging"):
            errors.append(f"{path}:{n.lineno} checks must not log")
    return errors


def _handler_errors(path: Path, tree: ast.Module) -> list[str]:
    errors: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ExceptHandler):
            if node.type is None:
                errors.append(f"{path}:{node.lineno} bare 'except' is forbidden")
            if not _has_raise(node) and not _calls_any(node, HANDLER_ESCAPES):
                errors.append(f"{path}:{node.lineno} except without re-raise is forbidden")
    return errors


def check_path(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
        tree = ast.parse(text, filename=str(path))
    except Exception as exc:  # pragma: no cover - guard must not crash silently
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise

    errors = _handler_errors(path, tree)
    if path.name == PRODUCER_MODULE:
        errors.extend(_producer_errors(path, tree))
    if path.name != LOGGING_MODULE:
        errors.extend(_logging_errors(path, tree))
    return errors


def run(roots: list[str]) -> int:
    all_errors: list[str] = []
    for path in iter_python_files(roots):
        all_errors.extend(check_path(path))
    if all_errors:
        sys.stderr.write("\n".join(all_errors) + "\n")
        return 1
    return 0


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
