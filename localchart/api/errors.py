"""Error envelope and exception handlers for the chart API."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import ChartGenerationError


class ErrorEnvelope(BaseModel):
    """Error payload returned by every failing endpoint."""

    code: str = Field(description="Machine readable error code.")
    message: str = Field(description="Human friendly summary of the error.")
    details: Any | None = Field(default=None, description="Optional structured context.")


def _respond(status_code: int, code: str, message: str, details: Any = None) -> ORJSONResponse:
    envelope = ErrorEnvelope(code=code, message=message, details=details)
    return ORJSONResponse(status_code=status_code, content=envelope.model_dump())


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> ORJSONResponse:
    # unknown routes and wrong methods land here
    status = HTTPStatus(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else status.phrase
    return _respond(exc.status_code, status.name, message)


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> ORJSONResponse:
    return _respond(422, "VALIDATION_ERROR", "Request validation failed.", exc.errors())


async def generation_exception_handler(_: Request, exc: ChartGenerationError) -> ORJSONResponse:
    details = {
        "type": exc.chart_type,
        "error_report": str(exc.error_path) if exc.error_path else None,
    }
    return _respond(500, "CHART_GENERATION_FAILED", str(exc), details)


async def unhandled_exception_handler(_: Request, exc: Exception) -> ORJSONResponse:  # pragma: no cover
    return _respond(
        500,
        "INTERNAL_ERROR",
        "An unexpected error occurred while rendering the chart.",
        {"type": exc.__class__.__name__},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ChartGenerationError, generation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["ErrorEnvelope", "install_error_handlers"]
