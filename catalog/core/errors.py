# catalog/core/errors.py
"""
Exception handlers that keep every error inside the response envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.config import settings
from catalog.core.responses import send_error

logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Validation Error."
SERVER_ERROR_MESSAGE = "Server Error."


def _field_errors(exc: RequestValidationError) -> dict:
    errors: dict = {}
    for error in exc.errors():
        # loc looks like ("path", "product_id") or ("body",)
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return send_error(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = _field_errors(exc)
    logger.warning(f"{request.method} {request.url.path} rejected: {errors}")
    return send_error(
        VALIDATION_ERROR_MESSAGE,
        errors=errors,
        status_code=settings.VALIDATION_ERROR_STATUS,
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return send_error(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def setup_error_handling(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
