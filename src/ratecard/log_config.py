"""structlog configuration shared by the CLI and embedding applications."""

import logging
import sys

import structlog


def configure_logging(production: bool = False, level: str = "INFO") -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering.
    Development mode: colored console rendering.

    Args:
        production: Enable production mode if ``True``.
        level: Minimum level name, e.g. ``"DEBUG"``.  Unknown names fall
            back to INFO.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="ratecard")
