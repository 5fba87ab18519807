"""Logging setup for the geolayout command line.

Library modules log through stdlib ``logging``; this routes those records
to stderr through a structlog formatter, either as colored console lines or
as JSON lines (--log-json).
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a stderr handler that renders geolayout's log records.

    Args:
        verbose: Show geolayout's DEBUG records. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("geolayout").setLevel(logging.DEBUG if verbose else logging.WARNING)
