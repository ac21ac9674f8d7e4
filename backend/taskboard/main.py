import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .core.errors import register_exception_handlers
from .core.logging_setup import setup_logging
from .core.middleware import RequestLoggingMiddleware
from .core.responses import ApiJSONResponse
from .db.store import MemoryStore
from .routers import stats as stats_router
from .routers import tasks as tasks_router
from .routers import users as users_router
from .schemas.common import HealthResponse
from .services.board import BoardService, BoardStore, parse_int

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info("Taskboard API starting on http://%s", settings.bind_address)
    yield
    logger.info("Taskboard API shutting down")


def create_app(settings: Optional[Settings] = None, store: Optional[BoardStore] = None) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = MemoryStore.seeded() if settings.seed_data else MemoryStore()

    app = FastAPI(
        title="Taskboard API",
        version="0.1.0",
        lifespan=lifespan,
        redirect_slashes=False,
        default_response_class=ApiJSONResponse,
    )
    app.state.settings = settings
    app.state.service = BoardService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware, colors=settings.log_colors)
    register_exception_handlers(app)

    app.include_router(users_router.router)
    app.include_router(tasks_router.router)
    app.include_router(stats_router.router)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", message="Taskboard API is running")

    return app


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    port = parse_int(settings.port)
    if port is None or not 0 <= port <= 65535:
        logger.critical("server failed to start: invalid port %r", settings.port)
        sys.exit(1)

    app = create_app(settings)
    try:
        # uvicorn exits with status 1 when the listener cannot bind
        uvicorn.run(app, host=settings.host, port=port, log_config=None, access_log=False)
    except SystemExit as exc:
        if exc.code:
            logger.critical("server failed to start on %s", settings.bind_address)
        raise


if __name__ == "__main__":
    run()
