"""Logging setup for the API server and CLI."""

import logging
import sys

from guessgame.api.middleware import RequestContextFilter
from guessgame.config import settings

DEV_FORMAT = "%(levelname)s:     %(name)s - %(message)s"
PROD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

# Third-party loggers that drown out request logs at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite")


def _stream_handler(formatter: str, filters: list[str] | None = None) -> dict:
    handler = {
        "class": "logging.StreamHandler",
        "formatter": formatter,
        "stream": "ext://sys.stdout",
    }
    if filters:
        handler["filters"] = filters
    return handler


def get_uvicorn_log_config() -> dict:
    """Build uvicorn's ``log_config`` for the current environment.

    Outside development the server log lines carry the request ID.
    """
    if settings.is_development:
        access_fmt = '%(levelprefix)s "%(request_line)s" %(status_code)s'
        default_fmt = "%(levelprefix)s %(message)s"
    else:
        access_fmt = '%(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s'
        default_fmt = "%(asctime)s %(levelprefix)s [%(request_id)s] %(message)s"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_context": {"()": "guessgame.api.middleware.RequestContextFilter"},
        },
        "formatters": {
            "access": {"()": "uvicorn.logging.AccessFormatter", "fmt": access_fmt},
            "default": {"()": "uvicorn.logging.DefaultFormatter", "fmt": default_fmt},
        },
        "handlers": {
            "access": _stream_handler("access"),
            "default": _stream_handler("default", filters=["request_context"]),
        },
        "loggers": {
            "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": "INFO", "propagate": False},
        },
        "root": {"handlers": ["default"], "level": settings.log_level},
    }


def setup_logging() -> None:
    """Configure the root logger and tag records with the request ID."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=DEV_FORMAT if settings.is_development else PROD_FORMAT,
        stream=sys.stdout,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestContextFilter())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
