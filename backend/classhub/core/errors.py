"""Exception handlers that give every failure the same JSON shape.

* request validation problems -> 400 ``{"errors": [{field, message, location}]}``
* ``HTTPException`` (404, 409, 500 raised by handlers) -> ``{"error": detail}``
* anything unhandled -> 500 with a generic message; detail goes to the log only
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FieldValidationError(Exception):
    """Raised by handlers for checks the request schema cannot express."""

    def __init__(self, field: str, message: str, location: str = "body") -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.location = location


def _field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    out: list[dict[str, str]] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        location = loc[0] if loc else "request"
        field = ".".join(loc[1:]) if len(loc) > 1 else location
        out.append({"field": field, "message": err.get("msg", "Invalid value"), "location": location})
    return out


def validation_error_response(errors: list[dict[str, str]]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return validation_error_response(_field_errors(exc.errors()))


async def field_validation_handler(request: Request, exc: FieldValidationError) -> JSONResponse:
    return validation_error_response(
        [{"field": exc.field, "message": exc.message, "location": exc.location}]
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(FieldValidationError, field_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


@contextmanager
def persistence_guard(db: Session, failure_message: str) -> Iterator[None]:
    """Turn store and disk failures into a generic 500, rolling back the session."""
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        db.rollback()
        logger.exception(failure_message)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message) from exc
