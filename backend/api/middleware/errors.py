"""
Exception handlers.

Renders every error as the JSON envelope the storefront expects:
``{"success": false, "error": <message>, "code": <code>}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import InternalError, StorefrontError

from ..models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)


def _field_name(error: dict) -> str:
    # loc is ("body", "email") for body fields
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    return ".".join(loc) or "body"


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.code}")

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    # Internal detail stays in the log
    message = "Internal server error" if isinstance(exc, InternalError) else exc.message
    body = ErrorResponse(error=message, code=exc.code)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [_field_name(error) for error in exc.errors()]
    body = ValidationErrorResponse(
        error=f"Invalid request: {', '.join(fields)}" if fields else "Invalid request",
        fields=fields,
    )
    return JSONResponse(status_code=400, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = ErrorResponse(error="Internal server error", code="INTERNAL_ERROR")
    return JSONResponse(status_code=500, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
