"""
errors.py — Cross-cutting error envelope.

Every non-2xx response body has the same shape:
    {"error": {"code": "...", "message": "...", "details": [{"field": ..., "issue": ...}]}}
"""
from typing import Any, List, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    field: Optional[str] = None
    issue: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: List[ErrorDetail] = []


class ErrorResponse(BaseModel):
    error: ErrorBody


def make_error_response(
    code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
    status_code: int = 500,
) -> JSONResponse:
    """Build a standard {error: {code, message, details}} response."""
    body = ErrorResponse(
        error=ErrorBody(
            code=code,
            message=message,
            details=[ErrorDetail(**d) for d in details or []],
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())
