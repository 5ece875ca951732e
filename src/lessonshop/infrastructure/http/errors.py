"""Map domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from lessonshop.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CapacityError,
    DomainException,
    NotFoundError,
    StorageError,
    ValidationError,
)

STATUS_CODES: dict[type[DomainException], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    CapacityError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: DomainException) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in STATUS_CODES:
            return STATUS_CODES[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    code = status_code_for(exc)
    if code >= 500:
        logger.opt(exception=exc).error("{} {} failed: {}", request.method, request.url.path, exc)
        message = "Storage unavailable, please retry"
    else:
        logger.warning("{} {} rejected: {}", request.method, request.url.path, exc)
        message = str(exc)
    return JSONResponse(status_code=code, content={"message": message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("{} {} bad request body: {}", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Request body must be a JSON object"},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled exception on {} {}", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


EXCEPTION_HANDLERS = {
    DomainException: domain_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
