"""Structured logging for the library and the speedrun-api CLI.

Library modules only call ``structlog.get_logger("speedrun_api.<area>")``;
nothing is rendered until an application calls :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

LOG_FORMATS = ("console", "json")

# Third-party loggers that log every request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(fmt: str, stream: TextIO) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib logging through one handler.

    Explicit arguments win over the environment:
        SPEEDRUN_API_LOG_LEVEL   level for ``speedrun_api.*`` (default: INFO)
        SPEEDRUN_API_LOG_FORMAT  console | json (default: console)

    Output goes to *stream*, stderr by default, so that CLI output on stdout
    stays machine-readable.
    """
    log_level = (level or os.environ.get("SPEEDRUN_API_LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.environ.get("SPEEDRUN_API_LOG_FORMAT", "console")).lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"unknown log format {log_format!r}, expected one of {LOG_FORMATS}")
    stream = stream or sys.stderr

    shared = _shared_processors()
    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format, stream),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)
    logging.getLogger("speedrun_api").setLevel(log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
