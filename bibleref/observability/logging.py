"""
bibleref - Structured Logging

structlog routed through the standard library. Library modules only ask
for loggers; handlers are installed by ``setup_logging``, which the CLI
calls at startup. Until then events go to stdlib logging unhandled, so
importing bibleref never prints anything.

Features:
- JSON or colored console rendering
- Optional rotating log file
- Context binding (``LogContext``, ``bind_context``)

Usage:
    from bibleref.observability.logging import setup_logging, get_logger

    setup_logging(LoggingConfig(level="INFO", json_format=True))

    logger = get_logger(__name__)
    logger.info("Parsed reference", reference="Genesis 1:1")
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import EventDict, WrappedLogger

# Global state
_configured: bool = False

_SHARED_PROCESSORS: List[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
]


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    service_name: str = "bibleref"
    level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )
    json_format: bool = field(
        default_factory=lambda: os.getenv("LOG_FORMAT", "console").lower() == "json"
    )
    log_to_console: bool = True
    log_to_file: bool = field(
        default_factory=lambda: os.getenv("LOG_TO_FILE", "false").lower() == "true"
    )
    log_file_path: Path = field(
        default_factory=lambda: Path(os.getenv("LOG_FILE", "./logs/bibleref.log"))
    )
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    include_timestamp: bool = True
    environment: str = field(
        default_factory=lambda: os.getenv("BIBLEREF_ENV", "development")
    )


def add_service_context(
    service_name: str,
    environment: str,
) -> structlog.types.Processor:
    """
    Create a processor that adds service context to all log events.

    Args:
        service_name: Name of the service
        environment: Deployment environment
    """

    def processor(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict["service"] = service_name
        event_dict["environment"] = environment
        return event_dict

    return processor


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO8601 timestamp."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _configure_structlog(processors: List[structlog.types.Processor]) -> None:
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _ensure_structlog() -> None:
    """Route structlog through stdlib logging without touching handlers."""
    if not structlog.is_configured():
        _configure_structlog(
            _SHARED_PROCESSORS + [structlog.stdlib.render_to_log_kwargs]
        )


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure structlog and the root logger's handlers.

    Args:
        config: Logging configuration. Uses defaults if not provided.

    Example:
        setup_logging(LoggingConfig(level="DEBUG", json_format=False))
    """
    global _configured

    if _configured:
        return

    config = config or LoggingConfig()

    processors: List[structlog.types.Processor] = list(_SHARED_PROCESSORS)
    processors.append(add_service_context(config.service_name, config.environment))

    if config.include_timestamp:
        processors.append(add_timestamp)

    processors.append(structlog.stdlib.PositionalArgumentsFormatter())
    processors.append(structlog.processors.StackInfoRenderer())
    processors.append(structlog.processors.format_exc_info)
    processors.append(structlog.processors.UnicodeDecoder())

    if config.json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    _configure_structlog(processors)
    _configure_stdlib_logging(config)

    _configured = True


def _configure_stdlib_logging(config: LoggingConfig) -> None:
    """Configure Python standard library logging."""
    handlers: list[logging.Handler] = []
    level = getattr(logging, config.level, logging.WARNING)

    # Events arrive already rendered by structlog.
    if config.log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if config.log_to_file:
        from logging.handlers import RotatingFileHandler

        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            config.log_file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name, typically __name__

    Example:
        logger = get_logger(__name__)
        logger.debug("Reference rejected", input="Gen 99")
    """
    _ensure_structlog()
    return structlog.get_logger(name)


def shutdown_logging() -> None:
    """Flush handlers and allow ``setup_logging`` to run again."""
    global _configured

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        # The stream may already be closed (e.g. a swapped-out sys.stderr).
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):
            pass

    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()
    _ensure_structlog()
    _configured = False


class LogContext:
    """
    Context manager for adding contextual information to all logs.

    Example:
        with LogContext(command="parse"):
            logger.info("Starting")
    """

    def __init__(self, **kwargs: Any):
        self.context: Dict[str, Any] = kwargs

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())


def bind_context(**kwargs: Any) -> None:
    """Bind contextual variables to all subsequent log messages."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove contextual variables from log context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound contextual variables."""
    structlog.contextvars.clear_contextvars()
