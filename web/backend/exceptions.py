#!/usr/bin/env python3
"""
Error handlers for the web application.

Core services raise the exceptions defined in core.errors; the handlers here
turn them into JSON responses with a consistent shape.
"""

import logging

from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import (
    ServiceException,
    NotFoundError,
    BusinessRuleError,
    ConflictError,
)

logger = logging.getLogger(__name__)


def status_code_for(exc: ServiceException) -> int:
    """HTTP status code for a service exception."""
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, (BusinessRuleError, ConflictError)):
        return 400
    return 500


def _error_body(error, error_type: str) -> dict:
    return {
        "success": False,
        "error": error,
        "type": error_type
    }


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Request rejected in {request.url.path}: {exc.__class__.__name__}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content=_error_body(str(exc), exc.__class__.__name__)
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Answer malformed requests with 400 instead of FastAPI's default 422.
    """
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.info(f"Invalid request to {request.url.path}: {errors}")

    return JSONResponse(
        status_code=400,
        content=_error_body(errors, "ValidationError")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Details stay in the log; the client only sees a generic message.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )
