"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from frontend.app.api.routes.create import router as create_router
from frontend.app.api.routes.health import router as health_router
from frontend.app.api.routes.home import router as home_router
from frontend.app.api.routes.posts import router as posts_router
from frontend.app.core.logging import setup_logging
from frontend.app.core.settings import settings

setup_logging(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("app_start")
    logger.info("config_loaded: %s", settings.safe_dump())
    logger.info("Blog frontend ready")
    yield
    logger.info("Blog frontend shutting down")


app = FastAPI(
    title="Blog Frontend",
    version="0.1.0",
    description="Server-rendered blog pages backed by a remote content API.",
    lifespan=lifespan,
    debug=settings.debug,
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Catch-all handler: log details, return safe generic message."""
    from frontend.app.core.errors import normalize_unknown_error

    error = normalize_unknown_error(exc, operation=f"{request.method} {request.url.path}")
    return PlainTextResponse(error.user_message, status_code=error.http_status)


app.include_router(health_router, tags=["health"])
app.include_router(home_router, tags=["pages"])
app.include_router(create_router, tags=["pages"])
app.include_router(posts_router, tags=["pages"])
