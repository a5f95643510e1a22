"""Logging configuration tests."""

import logging

from guessgame.api.middleware import RequestContextFilter, request_id_var
from guessgame.logging import get_uvicorn_log_config, setup_logging


def make_record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_outside_request():
    record = make_record()
    assert RequestContextFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_inside_request():
    token = request_id_var.set("abc123")
    try:
        record = make_record()
        RequestContextFilter().filter(record)
        assert record.request_id == "abc123"
    finally:
        request_id_var.reset(token)


def test_uvicorn_config_uses_request_filter():
    config = get_uvicorn_log_config()
    assert config["handlers"]["default"]["filters"] == ["request_context"]
    assert config["filters"]["request_context"]["()"] == "guessgame.api.middleware.RequestContextFilter"


def test_setup_logging_quiets_http_clients():
    setup_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("aiosqlite").level == logging.WARNING
