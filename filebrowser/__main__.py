from __future__ import annotations

import argparse
import sys

import structlog
import uvicorn
from jinja2 import TemplateError

from .config import settings
from .log import configure_logging
from .main import create_app
from .services.browser import Browser
from .services.filesystem import LocalFileSystem
from .templates import TEMPLATES

logger = structlog.get_logger(__name__)

LOG_LEVELS = ['critical', 'error', 'warning', 'info', 'debug', 'trace']


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='filebrowser', description='Serve an HTML listing of a directory tree.')
    parser.add_argument('--dir', default=settings.browse_root, help='directory to serve files from')
    parser.add_argument('--host', default=settings.app_host, help='address to listen on')
    parser.add_argument('--port', type=int, default=settings.app_port, help='port to listen on')
    parser.add_argument('--template', choices=sorted(TEMPLATES), default=settings.browse_template)
    parser.add_argument('--log-level', type=str.lower, choices=LOG_LEVELS, default=settings.log_level.lower())
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, settings.log_json)

    try:
        browser = Browser(LocalFileSystem(args.dir), TEMPLATES[args.template])
    except (OSError, TemplateError) as exc:
        logger.error('browser_init_failed', dir=args.dir, error=str(exc))
        return 1

    logger.info('serving', root=browser.root_abs, host=args.host, port=args.port)
    uvicorn.run(create_app(browser), host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


if __name__ == '__main__':
    sys.exit(main())
