"""Structured logging for depcontainer.

Library loggers wrap stdlib loggers and render through whatever structlog
configuration the host application has installed. Nothing is configured on
import; ``configure_logging`` is the opt-in for applications that want the
container's settings to drive logging.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

from depcontainer.config import ContainerSettings

# Shared by structlog events and records coming from plain stdlib loggers.
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def configure_logging(
    settings: ContainerSettings | None = None,
    *,
    log_file: Path | None = None,
) -> logging.Handler:
    """Route structlog and stdlib logging through one root handler.

    Args:
        settings: Level and output format (JSON or console); defaults if omitted
        log_file: Append to this file instead of stderr

    Returns:
        The handler installed on the root logger
    """
    settings = settings or ContainerSettings()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        colors = False
    else:
        handler = logging.StreamHandler(sys.stderr)
        colors = sys.stderr.isatty()

    renderer: structlog.types.Processor
    if settings.json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by ``logging.getLogger(name)``.

    Processors are looked up from the current structlog configuration on each
    call, so loggers created at import follow a later ``configure_logging``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
