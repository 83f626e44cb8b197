# Domain errors and the centralized exception handlers
# movies_lib/core/errors.py

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong"


class CustomError(Exception):
    """
    Base class for expected (domain) errors.

    Carries the HTTP status code the centralized handler should answer with
    and one or more error entries, each a dict with at least a "message" key.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        if errors is None:
            errors = [{"message": message or GENERIC_ERROR_MESSAGE}]
        self.errors = errors
        super().__init__(errors[0].get("message", GENERIC_ERROR_MESSAGE))

    def serialize_errors(self) -> List[Dict[str, Any]]:
        return [dict(entry) for entry in self.errors]


class BadRequestError(CustomError):
    """Missing required input or a payload that failed validation."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CustomError):
    """Key or identifier not found, or a store operation that affected nothing."""
    status_code = status.HTTP_404_NOT_FOUND


class ServiceUnavailableError(CustomError):
    """The database handle is not available to serve the request."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def _format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flattens pydantic error details into the {"message", "field"} error shape."""
    formatted = []
    for error in exc.errors():
        # Drop the "body"/"path"/"query" prefix, and the character offset of a JSON decode error
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid":
            loc = ()
        location = [str(part) for part in loc if part not in ("body", "path", "query")]
        field = ".".join(location) or None
        message = error.get("msg", "Invalid value")
        formatted.append({
            "message": f"{field}: {message}" if field else message,
            "field": field,
        })
    return formatted


async def custom_error_handler(request: Request, exc: CustomError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"errors": exc.serialize_errors()})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _format_validation_errors(exc)
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # No route matched path + verb
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.info(f"No route for {request.method} {request.url.path}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"errors": [{"message": GENERIC_ERROR_MESSAGE}]},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Installs the centralized error handlers on the application."""
    app.add_exception_handler(CustomError, custom_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
