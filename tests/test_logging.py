"""Tests for structured logging setup."""

from __future__ import annotations

import io
import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from speedrun_api.core.logging import setup_logging

_TOUCHED = ("", "speedrun_api", "httpx", "httpcore")


@pytest.fixture(autouse=True)
def _restore_logging():
    saved = {name: logging.getLogger(name).level for name in _TOUCHED}
    handlers = logging.getLogger().handlers[:]
    yield
    logging.getLogger().handlers[:] = handlers
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_level_from_environment(self):
        with patch.dict(os.environ, {"SPEEDRUN_API_LOG_LEVEL": "debug"}):
            setup_logging(stream=io.StringIO())
        assert logging.getLogger("speedrun_api").level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_explicit_level_wins(self):
        with patch.dict(os.environ, {"SPEEDRUN_API_LOG_LEVEL": "DEBUG"}):
            setup_logging("error", stream=io.StringIO())
        assert logging.getLogger("speedrun_api").level == logging.ERROR

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError, match="xml"):
            setup_logging("INFO", "xml")

    def test_json_events(self):
        out = io.StringIO()
        setup_logging("DEBUG", "json", stream=out)
        structlog.get_logger("speedrun_api.pagination").debug("pagination.page", offset=40)

        record = json.loads(out.getvalue().splitlines()[-1])
        assert record["event"] == "pagination.page"
        assert record["offset"] == 40
        assert record["level"] == "debug"
        assert record["logger"] == "speedrun_api.pagination"

    def test_stdlib_records_share_the_renderer(self):
        out = io.StringIO()
        setup_logging("INFO", "json", stream=out)
        logging.getLogger("speedrun_api.other").warning("plain stdlib message")

        record = json.loads(out.getvalue().splitlines()[-1])
        assert record["event"] == "plain stdlib message"
        assert record["level"] == "warning"

    def test_level_filters_library_debug(self):
        out = io.StringIO()
        setup_logging("INFO", "json", stream=out)
        structlog.get_logger("speedrun_api.client").debug("api.request", url="x")
        assert out.getvalue() == ""
