"""Translate domain and request validation errors into JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chat_system.errors import ChatSystemError, ValidationFailure
from chat_system.logger_config import get_logger

logger = get_logger(__name__)


async def chat_system_error_handler(
    request: Request, exc: ChatSystemError
) -> JSONResponse:
    """Render a ChatSystemError as ``{"error": message}`` with its status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Join pydantic error entries into ``"application.name: Input should be ..."`` text."""
    messages = []
    for error in exc.errors():
        # The leading location names the request part ("body", "path", "query").
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies, paths and queries like a ValidationFailure."""
    return await chat_system_error_handler(
        request, ValidationFailure(describe_validation_errors(exc))
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to the application."""
    app.add_exception_handler(ChatSystemError, chat_system_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, request_validation_error_handler  # type: ignore[arg-type]
    )
