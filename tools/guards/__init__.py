"""Guard runners for the library's own source.

Each guard exposes a `run(roots: list[str]) -> int` function that returns
non-zero on violations.
"""
