"""
Global exception handlers.

Routers never catch application exceptions; they propagate out of the handler
unchanged and are converted here into ResponseWrapper error bodies with a
consistent status code.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from constants import HTTPStatus, ErrorCode, NO_TRACE_ID
from dtos.response import ResponseWrapper
from exceptions import (
    ApplicationError,
    NotFoundError,
    ConflictError,
    ValidationError,
    AuthenticationError,
    DatabaseError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins
ERROR_STATUS_MAP = (
    (NotFoundError, HTTPStatus.NOT_FOUND, ErrorCode.NOT_FOUND),
    (ConflictError, HTTPStatus.CONFLICT, ErrorCode.CONFLICT),
    (ValidationError, HTTPStatus.BAD_REQUEST, ErrorCode.VALIDATION_ERROR),
    (AuthenticationError, HTTPStatus.UNAUTHORIZED, ErrorCode.UNAUTHORIZED),
    (DatabaseError, HTTPStatus.INTERNAL_SERVER_ERROR, ErrorCode.DATABASE_ERROR),
)


def status_for(exc: ApplicationError) -> tuple[int, ErrorCode]:
    """
    Map an application exception to an HTTP status and error code.

    Args:
        exc: Exception raised by the service layer

    Returns:
        (status_code, error_code); unknown ApplicationError subclasses map to 500
    """
    for exc_type, status_code, code in ERROR_STATUS_MAP:
        if isinstance(exc, exc_type):
            return status_code, code
    return HTTPStatus.INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_ERROR


def error_response(status_code: int, code: str, message: str, details: dict | None = None,
                   headers: dict | None = None) -> JSONResponse:
    body = ResponseWrapper.fail(code, message, details)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers
    )


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    status_code, code = status_for(exc)
    operation = f"{request.method} {request.url.path}"

    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{operation} - {type(exc).__name__}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{operation} - {type(exc).__name__}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return error_response(status_code, code.value, exc.message, exc.details, headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"{request.method} {request.url.path} - Validation error: {len(errors)} issue(s)")
    return error_response(
        HTTPStatus.UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR.value,
        "Request validation failed",
        {"errors": errors}
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"{request.method} {request.url.path} - Unexpected error: {exc}",
        exc_info=exc,
        extra={"trace_id": getattr(request.state, "trace_id", NO_TRACE_ID)}
    )
    return error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR.value,
        "Internal server error. Please check server logs or contact support."
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the global exception handlers to an application."""
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
