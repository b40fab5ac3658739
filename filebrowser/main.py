from __future__ import annotations

from http import HTTPStatus
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config import Settings, settings
from .routers import browse
from .services.browser import Browser
from .services.filesystem import LocalFileSystem
from .templates import TEMPLATES

logger = structlog.get_logger(__name__)


def build_browser(config: Settings) -> Browser:
    return Browser(LocalFileSystem(config.browse_root), TEMPLATES[config.browse_template])


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error('unhandled_exception', path=request.url.path, error=repr(exc))
    return PlainTextResponse(browse.GENERIC_ERROR_BODY, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


def create_app(browser: Optional[Browser] = None, config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        routes=list(browse.routes),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.browser = browser if browser is not None else build_browser(config)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    return app


app = create_app()
