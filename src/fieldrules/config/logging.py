"""structlog configuration for fieldrules.

The library itself only logs through stdlib ``logging`` under the
``fieldrules`` logger; applications that want structured output call
:func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "fieldrules"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _build_formatter(*, log_json: bool, stream: TextIO) -> structlog.stdlib.ProcessorFormatter:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route ``fieldrules`` log records through structlog.

    Replaces any handlers on the root logger with a single stream handler,
    so repeated calls never stack output. This also removes handlers the
    host application installed: call it only from an application entry
    point, never from library code.

    Args:
        verbose: Emit DEBUG records from ``fieldrules``. When False, only WARNING+.
        log_json: One JSON object per line instead of console formatting.
        stream: Destination, ``sys.stderr`` by default.
    """
    target = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(_build_formatter(log_json=log_json, stream=target))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
