from datetime import UTC, datetime
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.shared import Logger
from app.shared.errors import ResourceNotFoundError

__all__ = ["ErrorResponse", "register_exception_handlers"]

logger = Logger(__name__).get_logger()


class ErrorResponse(BaseModel):
    """Body returned for every mapped error."""

    timestamp: str
    status: int
    error: str
    message: str
    path: str


def error_response(request: Request, status: HTTPStatus, message: str) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(UTC).isoformat(),
        status=status.value,
        error=status.phrase,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status.value, content=body.model_dump())


async def handle_resource_not_found(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:
    logger.warning("Resource not found: %s", exc.message)
    return error_response(request, HTTPStatus.NOT_FOUND, exc.message)


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("Bad request: %s", exc)
    return error_response(request, HTTPStatus.BAD_REQUEST, str(exc) or "Invalid request")


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error: %s", exc, exc_info=exc)
    return error_response(
        request, HTTPStatus.INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, handle_resource_not_found)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(Exception, handle_unexpected)
