# src/cacheprobe/utils/logger.py
"""Structured JSON logging via structlog on top of stdlib logging.

The level comes from `LoggingConfig` (LOG_LEVEL). Import the shared logger:
    from src.cacheprobe.utils.logger import logger
"""
import logging
import sys

import structlog

from src.cacheprobe.config.settings import LoggingConfig

_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(ensure_ascii=False),
]


def configure_logging(level: str) -> None:
    """(Re)apply the log level; safe to call more than once."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    structlog.configure(
        processors=_PROCESSORS,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(LoggingConfig().level)
logger = structlog.get_logger("cacheprobe")
