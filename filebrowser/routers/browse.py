from __future__ import annotations

from http import HTTPStatus
from io import StringIO

import structlog
from fastapi import Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route

from ..services.browser import AccessDenied, Browser

logger = structlog.get_logger(__name__)

GENERIC_ERROR_BODY = 'an error occurred'


def get_browser(request: Request) -> Browser:
    return request.app.state.browser


def browse(path: str, browser: Browser) -> Response:
    out = StringIO()
    try:
        browser.file_listing(path, out)
    except AccessDenied:
        return PlainTextResponse(HTTPStatus.FORBIDDEN.phrase, status_code=HTTPStatus.FORBIDDEN)
    except Exception:
        logger.exception('listing_failed', path=path)
        return PlainTextResponse(GENERIC_ERROR_BODY, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)

    return HTMLResponse(out.getvalue())


def browse_endpoint(request: Request) -> Response:
    return browse(request.query_params.get('path', ''), get_browser(request))


# No methods list: every verb, including TRACE and WebDAV ones, reaches the listing.
routes = [Route('/', browse_endpoint, name='browse')]
