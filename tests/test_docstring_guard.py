from __future__ import annotations

from pathlib import Path

import pytest
from tools.guards import docstring_guard

PRODUCERS = '''from typing import NoReturn


def argument_null(parameter_name=None, message=None) -> NoReturn:
    raise ValueError(message)


def documented() -> NoReturn:
    """Already documented."""
    raise ValueError()


def one_liner() -> NoReturn: raise ValueError()


def _helper() -> str:
    return ""
'''


def test_docstring_guard_flags_undocumented_producers(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "throw.py"
    path.write_text(PRODUCERS, encoding="utf-8")

    rc = docstring_guard.run([str(tmp_path)])
    captured = capsys.readouterr()

    assert rc == 1
    assert "producer 'argument_null' has no docstring" in captured.err
    assert "one_liner" in captured.err
    assert "documented'" not in captured.err
    assert "_helper" not in captured.err


def test_docstring_guard_fix_inserts_default_docstring(tmp_path: Path) -> None:
    path = tmp_path / "throw.py"
    path.write_text(PRODUCERS, encoding="utf-8")

    rc = docstring_guard.run([str(path)], fix=True)

    assert rc == 0
    fixed = path.read_text(encoding="utf-8")
    assert fixed.count(docstring_guard.DEFAULT_DOCSTRING) == 2
    assert "def one_liner() -> NoReturn:\n" in fixed
    assert docstring_guard.check_path(path) == []
    assert docstring_guard.fix_path(path) == 0


def test_insert_default_docstrings_keeps_indentation() -> None:
    text = "def f():\n    return 1\n"
    fixed = docstring_guard.insert_default_docstrings(text, Path("f.py"))
    assert fixed == (
        f'def f():\n    """{docstring_guard.DEFAULT_DOCSTRING}"""\n    return 1\n'
    )


def test_library_producers_are_documented(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(Path(__file__).resolve().parents[1])
    assert docstring_guard.run(["guardclauses/throw.py"]) == 0
