from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """
    Initialize Python logging and structlog with consistent formatting.

    Builds a processor pipeline, swapping between console and JSON renderers, and configures
    structlog to honor the requested level. Records go to stderr so they never interleave
    with the quiz prompts on stdout.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, stream=sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(numeric_level)
    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None):
    """Return a structlog logger that inherits the global configuration."""
    return structlog.get_logger(name)
