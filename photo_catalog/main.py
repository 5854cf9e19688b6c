from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .errors import CatalogError
from .routers.api import router as api_router
from .services.s3_service import S3ListingClient
from .urls import URLFormatter

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"ERR": exc.payload()})


def create_app(
    cfg: Optional[Settings] = None,
    listing_client=None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the API. The listing client and the desc.json HTTP client can be
    injected; otherwise they are built from settings and the HTTP client is
    owned (and closed) by the app lifespan.
    """
    cfg = cfg or default_settings
    configure_logging(cfg.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if http_client is not None:
            yield
            return
        async with httpx.AsyncClient(timeout=cfg.DESCRIPTION_TIMEOUT_SECONDS) as client:
            app.state.http_client = client
            yield

    app = FastAPI(title=cfg.APP_NAME, lifespan=lifespan)
    app.state.settings = cfg
    app.state.urls = URLFormatter.from_settings(cfg)
    app.state.listing_client = listing_client or S3ListingClient.from_settings(cfg)
    app.state.http_client = http_client

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.include_router(api_router, prefix=cfg.API_PREFIX)

    logger.info("Serving s3://%s (%s)", cfg.AWS_BUCKET_NAME, cfg.AWS_REGION)
    return app


app = create_app()
