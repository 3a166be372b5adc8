"""Exception handlers that render every error as ``{"error": "<message>"}``."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ask.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Most specific first; DomainError catches anything not listed
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body used for every failure."""
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(errors: list[dict]) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error to its status code."""
    status_code = status_for(exc)
    logfire.info(
        "Request rejected",
        path=request.url.path,
        status=status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(status_code, str(exc))


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    """Render HTTPException from routes (missing auth) and routing (404, 405)."""
    return error_response(exc.status_code, str(exc.detail))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/query validation failures are reported as 400."""
    return error_response(
        status.HTTP_400_BAD_REQUEST, _validation_message(list(exc.errors()))
    )


async def handle_model_validation(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    """Domain model field rules broken by request data are reported as 400."""
    return error_response(
        status.HTTP_400_BAD_REQUEST, _validation_message(list(exc.errors()))
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a 500 with a generic message."""
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(pydantic.ValidationError, handle_model_validation)
    app.add_exception_handler(Exception, handle_unexpected)
