"""FastAPI application"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    InvalidRequestError,
    RepositoryError,
    UpstreamStatusError,
)
from src.db.database import init_db

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db()
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            app.state.http_client = client
            logger.info("Rendering service at %s", settings.gif_url)
            yield

    app = FastAPI(title="Chess GIF export", version="0.1.0", lifespan=lifespan)
    app.include_router(router)

    @app.exception_handler(InvalidRequestError)
    async def invalid_request(_: Request, exc: InvalidRequestError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RepositoryError)
    async def not_found(_: Request, exc: RepositoryError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(UpstreamStatusError)
    async def upstream_failed(_: Request, exc: UpstreamStatusError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run() -> None:
    """Serve the app with uvicorn (entry point of the `gif-export` command)."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
