"""FastAPI dependencies: wire one service per request."""

import httpx
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from src.core.config import Settings, get_settings
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository, SQLUserRepository
from src.gif.export import GifExport
from src.services.export_service import GifExportService
from src.users.light_user_api import LightUserApi


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Client opened for the lifetime of the app."""
    return request.app.state.http_client


def get_export_service(
    db: Session = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> GifExportService:
    export = GifExport(
        client,
        LightUserApi(SQLUserRepository(db)),
        base_url=settings.base_url,
        url=settings.gif_url,
    )
    return GifExportService(SQLGameRepository(db), export)
