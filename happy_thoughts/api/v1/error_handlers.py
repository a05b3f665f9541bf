"""
Translation of domain errors into HTTP responses.

Controllers convert ``HappyThoughtsError`` into ``HTTPException`` with
``to_http_exception``; the handlers registered by ``register_exception_handlers``
render every error body as ``{"error": <message>}``, or as
``{"success": false, "message": <message>}`` on the credential routes.
"""

# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...domain.exceptions import (
    ConflictError,
    DataAccessError,
    ForbiddenError,
    HappyThoughtsError,
    InvalidArgumentError,
    NotFoundError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_REQUEST_MESSAGE = "Invalid request"

# Routes whose error bodies use the {success, message} shape
CREDENTIAL_PATHS = frozenset({"/login", "/register"})

STATUS_BY_ERROR: Dict[Type[HappyThoughtsError], int] = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DataAccessError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exception: HappyThoughtsError) -> int:
    for error_type in type(exception).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(exception: HappyThoughtsError) -> HTTPException:
    """
    Map a domain error to an HTTPException
    
    Server-side failures are logged with their detail and answered with a
    generic message.
    
    Args:
        exception: Error raised by a use case or repository
        
    Returns:
        HTTPException ready to be raised
    """
    status_code = status_for(exception)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Unhandled store failure: {exception}", exc_info=exception)
        return HTTPException(status_code=status_code, detail=INTERNAL_ERROR_MESSAGE)
    return HTTPException(status_code=status_code, detail=exception.message)


def error_body(request: Request, message: str) -> dict:
    if request.url.path in CREDENTIAL_PATHS:
        return {"success": False, "message": message}
    return {"error": message}


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exception.status_code,
        content=error_body(request, str(exception.detail)),
        headers=getattr(exception, "headers", None),
    )


async def validation_exception_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    logger.debug(f"Rejected request body on {request.url.path}: {exception.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(request, INVALID_REQUEST_MESSAGE),
    )


async def domain_exception_handler(request: Request, exception: HappyThoughtsError) -> JSONResponse:
    http_exception = to_http_exception(exception)
    return await http_exception_handler(request, http_exception)


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(request, INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(HappyThoughtsError, domain_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
