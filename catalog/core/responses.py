# catalog/core/responses.py

from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_response(data: Any, message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Success envelope: ``{"success": true, "message": ..., "data": ...}``."""
    body = {
        "success": True,
        "message": message,
        "data": jsonable_encoder(data),
    }
    return JSONResponse(status_code=status_code, content=body)


def send_error(
    message: str,
    errors: Optional[Any] = None,
    status_code: int = status.HTTP_404_NOT_FOUND,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """
    Error envelope. ``data`` is only present when there is something to
    report, e.g. the per-field messages of a validation failure.
    """
    body = {
        "success": False,
        "message": message,
    }
    if errors is not None:
        body["data"] = jsonable_encoder(errors)
    return JSONResponse(status_code=status_code, content=body, headers=headers)
