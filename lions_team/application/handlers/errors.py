"""Exception handlers translating failures into JSON error bodies.

Every error response has the shape ``{"message": "..."}``.
"""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.logger import get_logger, request_context
from utils.sentry import capture_exception

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
DEFAULT_INVALID_MESSAGE = "Invalid request data"

# Matched on whole path segments, see invalid_data_message().
INVALID_DATA_MESSAGES: tuple[tuple[str, str], ...] = (
    ("/api/auth/login", "Username and password are required"),
    ("/api/auth/register", "Invalid user data"),
    ("/api/athletes", "Invalid athlete data"),
    ("/api/exercises", "Invalid exercise data"),
    ("/api/training-sessions", "Invalid training session data"),
    ("/api/events", "Invalid event data"),
    ("/api/gallery", "Invalid gallery item data"),
    ("/api/best-of-week", "Invalid best of week data"),
    ("/api/live-streams", "Invalid live stream data"),
)


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def invalid_data_message(path: str) -> str:
    """Pick the client-facing message for a rejected body on ``path``.

    >>> invalid_data_message("/api/events/abc")
    'Invalid event data'
    >>> invalid_data_message("/api/unknown")
    'Invalid request data'
    """

    for prefix, message in INVALID_DATA_MESSAGES:
        if path == prefix or path.startswith(prefix + "/"):
            return message
    return DEFAULT_INVALID_MESSAGE


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"message": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(
        "Rejected request body",
        extra=request_context(request.method, request.url.path, 400),
    )
    return JSONResponse(
        {"message": invalid_data_message(request.url.path)},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while serving request",
        exc_info=exc,
        extra=request_context(request.method, request.url.path, 500),
    )
    capture_exception(exc, method=request.method, path=request.url.path)
    return JSONResponse(
        {"message": INTERNAL_ERROR_MESSAGE},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
