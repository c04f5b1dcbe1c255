"""
bibleref - Observability Package

Structured logging for the parser and its command-line wrapper.

Usage:
    from bibleref.observability import setup_logging, get_logger

    setup_logging(LoggingConfig(level="DEBUG", json_format=False))
    logger = get_logger(__name__)
"""
from .logging import (
    LogContext,
    LoggingConfig,
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
    shutdown_logging,
    unbind_context,
)

__all__ = [
    "LogContext",
    "LoggingConfig",
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "unbind_context",
]
