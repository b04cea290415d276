"""Logging setup.

The engine only emits through ``structlog.get_logger(__name__)``;
callers opt in to output by calling :func:`configure_logging`.
"""

from __future__ import annotations

import logging as _logging
from typing import Optional

import structlog

from .config import EngineSettings, get_settings


def configure_logging(settings: Optional[EngineSettings] = None) -> None:
    """Configure stdlib logging and the structlog processor chain.

    Args:
        settings: Engine settings (defaults to environment)
    """
    settings = settings or get_settings()
    level = getattr(_logging, settings.log_level, _logging.INFO)

    _logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
