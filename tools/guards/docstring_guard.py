"""Flag failure producers without a docstring and optionally insert a default one.

Run as ``python -m tools.guards.docstring_guard [--fix] PATH...``. Only public
module-level functions are inspected; ``format_*`` message helpers are skipped.
"""

from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DOCSTRING = (
    "Raises the default violation for this precondition, "
    "using the optional parameter name and message."
)


@dataclass(frozen=True)
class Diagnostic:
    path: Path
    lineno: int
    name: str

    def __str__(self) -> str:
        return f"{self.path}:{self.lineno} producer '{self.name}' has no docstring"


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
        elif base.is_dir():
            yield from base.rglob("*.py")


def _parse(path: Path, text: str) -> ast.Module:
    try:
        return ast.parse(text, filename=str(path))
    except SyntaxError as exc:  # pragma: no cover - guard must not crash silently
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise


def _undocumented(tree: ast.Module) -> list[ast.FunctionDef]:
    return [
        node
        for node in tree.body
        if isinstance(node, ast.FunctionDef)
        and not node.name.startswith(("_", "format_"))
        and ast.get_docstring(node) is None
    ]


def check_path(path: Path) -> list[Diagnostic]:
    text = path.read_text(encoding="utf-8")
    tree = _parse(path, text)
    return [Diagnostic(path, node.lineno, node.name) for node in _undocumented(tree)]


def insert_default_docstrings(text: str, path: Path) -> str:
    """Return ``text`` with the default docstring inserted into every flagged function.

    Functions are rewritten bottom-up so earlier line numbers stay valid. A body
    written on the ``def`` line is moved onto its own line.
    """
    tree = _parse(path, text)
    lines = text.splitlines(keepends=True)
    for node in sorted(_undocumented(tree), key=lambda n: n.lineno, reverse=True):
        first = node.body[0]
        indent = " " * (node.col_offset + 4)
        docstring = f'{indent}"""{DEFAULT_DOCSTRING}"""\n'
        index = first.lineno - 1
        if first.lineno == node.lineno:
            line = lines[index]
            head = line[: first.col_offset].rstrip()
            tail = line[first.col_offset :]
            lines[index : index + 1] = [f"{head}\n", docstring, f"{indent}{tail}"]
        else:
            lines.insert(index, docstring)
    return "".join(lines)


def fix_path(path: Path) -> int:
    """Rewrite ``path`` in place; return the number of inserted docstrings."""
    diagnostics = check_path(path)
    if not diagnostics:
        return 0
    text = path.read_text(encoding="utf-8")
    path.write_text(insert_default_docstrings(text, path), encoding="utf-8")
    return len(diagnostics)


def run(roots: list[str], fix: bool = False) -> int:
    all_errors: list[str] = []
    for path in iter_python_files(roots):
        if fix:
            fix_path(path)
        all_errors.extend(str(d) for d in check_path(path))
    if all_errors:
        sys.stderr.write("\n".join(all_errors) + "\n")
        return 1
    return 0


def main() -> int:
    args = sys.argv[1:]
    fix = "--fix" in args
    return run([a for a in args if a != "--fix"], fix=fix)


if __name__ == "__main__":
    raise SystemExit(main())
