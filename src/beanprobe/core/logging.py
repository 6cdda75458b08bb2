"""Structured logging for beanprobe.

Library modules log through ``get_logger(__name__)`` and emit dotted DEBUG
events (``accessors.getter_resolved``, ``accessors.setter_missing``). Nothing
is printed until ``configure_logging`` installs outputs; the CLI does this on
startup and lowers every output to DEBUG for ``-v``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from beanprobe.config.models import LoggingConfig, LogOutputConfig

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "INFO",
    verbose: bool = False,
) -> None:
    """Install structlog over stdlib logging.

    Args:
        config: Logging configuration with outputs. Wins over the simple params.
        json_format: Render JSON when no config is given.
        level: Root level when no config is given.
        verbose: Force the root level and every output to DEBUG.
    """
    from beanprobe.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = logging.DEBUG if verbose else _LEVEL_MAP.get(config.level, logging.INFO)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()
    root_logger.setLevel(root_level)

    for output in config.outputs:
        if verbose:
            output_level = logging.DEBUG
        else:
            output_level = _LEVEL_MAP.get(output.level or config.level, root_level)
        handler = _create_handler(output.destination)
        handler.setLevel(output_level)
        handler.setFormatter(_create_formatter(output))
        root_logger.addHandler(handler)


def _create_handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _create_formatter(output: LogOutputConfig) -> logging.Formatter:
    renderer: Any
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        is_console = output.destination in ("stderr", "stdout")
        renderer = structlog.dev.ConsoleRenderer(
            colors=is_console and sys.stderr.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer, foreign_pre_chain=_SHARED_PROCESSORS
    )


def get_logger(name: str | None = None) -> Any:
    """Return a lazy logger, bound to ``name`` when given.

    The logger resolves the structlog configuration on each call, so a
    module-level ``log = get_logger(__name__)`` follows later
    ``configure_logging`` calls.
    """
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()
