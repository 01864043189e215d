"""Internal tooling for repository guard checks.

This package hosts guard scripts that keep the library honest:
- Every failure producer carries a docstring (with an automatic fix)
- Producers are annotated NoReturn and actually raise
- Library checks never print or log
- No bare except and require re-raise in handlers
"""
