import logging
import time
from typing import Tuple

import click
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger("taskboard.access")


def level_for_status(status_code: int) -> Tuple[int, str, str]:
    """Return (logging level, tag, tag colour) for a response status."""
    if status_code >= 500:
        return logging.ERROR, "ERROR", "red"
    if status_code >= 400:
        return logging.WARNING, "WARN", "yellow"
    if status_code >= 300:
        return logging.INFO, "INFO", "cyan"
    return logging.INFO, "INFO", "green"


def log_request(method: str, path: str, status_code: int, elapsed: float, colors: bool = False) -> None:
    level, tag, colour = level_for_status(status_code)
    if colors:
        tag = click.style(tag, fg=colour)
    logger.log(level, "%s %s %s %d %.3fms", tag, method, path, status_code, elapsed * 1000)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, colors: bool = True) -> None:
        super().__init__(app)
        self.colors = colors

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code or 200
            return response
        finally:
            log_request(
                request.method,
                request.url.path,
                status_code,
                time.perf_counter() - start,
                colors=self.colors,
            )
