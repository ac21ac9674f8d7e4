"""Domain errors and their mapping onto HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import ApiJSONResponse

logger = logging.getLogger(__name__)


class BoardError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NotFoundError(BoardError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "resource not found"


class InvalidStatusError(BoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid status"


class InvalidUserError(BoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid user"


class NoUpdateFieldsError(BoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "no fields to update"


class EmailTakenError(BoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists"


async def board_error_handler(request: Request, exc: BoardError) -> ApiJSONResponse:
    return ApiJSONResponse({"detail": str(exc)}, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> ApiJSONResponse:
    return ApiJSONResponse({"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> ApiJSONResponse:
    logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return ApiJSONResponse({"detail": "Invalid request body"}, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BoardError, board_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
