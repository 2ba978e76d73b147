"""
Pydantic models for error responses.

Every error returned by the API carries a human‑readable ``message``.
Validation failures additionally list the offending parameters.
"""

from typing import List, Optional

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    message: str
    details: Optional[List[ErrorDetail]] = None
