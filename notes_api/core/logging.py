"""
Logging Setup.

structlog on top of the standard logging module. Handlers and format come
from the ``logging`` section of the application config
(config/settings/logging.yaml). setup_logging() is called once by the app
lifespan and once by run.py; keyword arguments override the configured
level and format, which is how NOTES_LOG_LEVEL and --verbose/--debug apply.

A JSON record carries timestamp, level, logger, event, func_name and
lineno, the request context bound by RequestContextMiddleware
(request_id, source, method, path) and any fields the caller passes, for
example ``logger.info("Note created", extra={"note_id": note.id})``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.typing import Processor

from notes_api.core.config import find_project_root, get_app_config
from notes_api.core.config_schema import FileHandlerSchema, LoggingSchema

_SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ],
    ),
]


def _formatter(renderer: Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _rotating_file_handler(file_config: FileHandlerSchema) -> RotatingFileHandler:
    """JSONL file under the project root, rotated by size."""
    log_path = find_project_root() / file_config.path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    config: LoggingSchema | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Log level name, overrides config.level
        format_type: 'json' or 'console', overrides config.format
        config: Logging section to apply; defaults to the loaded app config
    """
    if config is None:
        config = get_app_config().logging

    log_level = getattr(logging, (level or config.level).upper())
    if (format_type or config.format) == "console":
        console_renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        console_renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=_SHARED_PROCESSORS + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if config.handlers.console.enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(_formatter(console_renderer))
        root_logger.addHandler(console_handler)

    if config.handlers.file.enabled:
        root_logger.addHandler(_rotating_file_handler(config.handlers.file))

    # Request logging comes from RequestContextMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """structlog logger named after the calling module."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log with an explicit source field.

    Outside an HTTP request nothing binds ``source``; the CLI client uses
    this to tag its own request/response lines as "cli".

    Raises:
        AttributeError: If level is not a logger method
    """
    getattr(logger, level.lower())(message, source=source, **kwargs)
