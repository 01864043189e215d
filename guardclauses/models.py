from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from guardclauses.exceptions import ViolationKind


class ViolationResponse(BaseModel):
    error: str
    code: Literal["PRECONDITION_VIOLATED", "INVALID_OPERATION"]
    kind: ViolationKind
    parameter_name: str | None = None
    timestamp: datetime
