"""Structlog configuration for the portal core.

Probes log through structlog; this module decides how those events are
rendered. Terminals get a colored console renderer, everything else
(containers, log shippers) gets one JSON object per line.
"""

import logging
import os
import sys

import structlog

_TRUTHY = ("1", "true", "yes")


def _wants_colors() -> bool:
    # FORCE_COLOR lets containers without a TTY keep colored output
    if os.environ.get("FORCE_COLOR", "").lower() in _TRUTHY:
        return True
    return sys.stdout.isatty()


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name (e.g. "DEBUG", "INFO") to emit

    Raises:
        ValueError: If the level name is not a standard logging level
    """
    min_level = _resolve_level(level)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if _wants_colors():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
