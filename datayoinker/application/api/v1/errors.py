"""Centralized error transformation for API routes.

Maps DataYoinker errors (domain and infrastructure) to JSON error responses
of the form ``{"error": ..., "detail": ..., "status": ...}``.
"""

from typing import Any

from fastapi.responses import JSONResponse

from datayoinker.domain.shared.error import (
    DataYoinkerError,
    DomainError,
    InfrastructureError,
)


def error_body(error: str, detail: str, status: int) -> dict[str, Any]:
    return {"error": error, "detail": detail, "status": status}


def status_for(error: DataYoinkerError) -> int:
    """HTTP status code for a DataYoinker error."""
    if isinstance(error, DomainError):
        return 400
    if isinstance(error, InfrastructureError):
        return 500
    # Fallback for unknown DataYoinkerError subclasses
    return 500


def map_error(error: DataYoinkerError) -> JSONResponse:
    """Render a DataYoinker error with the same status in header and body."""
    status = status_for(error)
    return JSONResponse(
        status_code=status,
        content=error_body(error.message, error.detail, status),
    )
