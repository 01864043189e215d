"""FastAPI integration: turn violations raised in endpoints into JSON bodies.

Requires the ``web`` extra (``pip install guardclauses[web]``).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from guardclauses.exceptions import InvalidOperationViolation, PreconditionViolation
from guardclauses.models import ViolationResponse


def _status_for(
    exc: PreconditionViolation,
) -> tuple[int, Literal["PRECONDITION_VIOLATED", "INVALID_OPERATION"]]:
    if isinstance(exc, InvalidOperationViolation):
        return 409, "INVALID_OPERATION"
    return 422, "PRECONDITION_VIOLATED"


def to_response(exc: PreconditionViolation) -> ViolationResponse:
    _, code = _status_for(exc)
    return ViolationResponse(
        error=exc.message,
        code=code,
        kind=exc.kind,
        parameter_name=exc.parameter_name,
        timestamp=datetime.now(timezone.utc),
    )


async def violation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, PreconditionViolation):
        raise exc
    status_code, _ = _status_for(exc)
    payload = to_response(exc)
    return JSONResponse(
        status_code=status_code, content=payload.model_dump(mode="json")
    )


def install_exception_handlers(app: FastAPI) -> FastAPI:
    app.add_exception_handler(PreconditionViolation, violation_exception_handler)
    return app
