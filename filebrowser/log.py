from __future__ import annotations

import logging

import structlog


def configure_logging(level: str = 'info', json: bool = False) -> None:
    processors = [
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.add_log_level,
    ]
    if json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
    )
