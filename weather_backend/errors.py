"""
API error type and the handlers that render it as JSON.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "Invalid email address provided."


class ApiError(Exception):
    """An error that maps directly onto an HTTP status and a message body."""

    def __init__(self, status_code: int, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # A subscribe body that is not a JSON object is just another invalid email.
    if request.url.path.endswith("/subscribe"):
        logger.info("Rejected subscribe body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"message": INVALID_EMAIL_MESSAGE})
    return await request_validation_exception_handler(request, exc)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Only GET /weather and POST /subscribe exist; any other method is unrouted.
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
