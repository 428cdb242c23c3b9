"""
Exception handlers.

Every error response is a JSON object with an ``error`` string, plus
``fieldErrors`` for validation failures. Internal details are logged,
never returned.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import LibraryError

logger = logging.getLogger(__name__)


def _field_name(location: tuple) -> str:
    """Last named segment of a pydantic error location, e.g. ('body', 'year') -> 'year'."""
    for part in reversed(location):
        if isinstance(part, str):
            return part
    return "body"


async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s (%s) %s",
            request.method, request.url.path, exc.code, exc.message, exc.details,
        )
    else:
        logger.info(
            "%s %s -> %d %s %s",
            request.method, request.url.path, exc.status_code, exc.code, exc.details,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors: dict[str, str] = {}
    for error in exc.errors():
        field_errors.setdefault(_field_name(tuple(error.get("loc", ()))), error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "fieldErrors": field_errors},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LibraryError, library_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
