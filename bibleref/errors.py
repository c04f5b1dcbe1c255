"""
bibleref - Error Hierarchy

The core API reports problems as ``Err`` values (see ``bibleref.result``).
These exceptions exist for callers that prefer raising: ``Err.unwrap()``
and ``Reference.parse()`` convert a failure into the class matching its
``ErrorKind``.

Features:
- Hierarchical exception classes with a stable ``error_code``
- Severity levels for prioritized handling
- Structured context (input text, offending position)
- Dictionary form for JSON output
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .result import Err, ErrorKind


class ErrorSeverity(Enum):
    """Error severity levels for prioritized handling."""

    WARNING = "warning"    # bad user input, caller can retry
    CRITICAL = "critical"  # misconfiguration, nothing will work


@dataclass
class ErrorContext:
    """Structured context for error reporting."""

    operation: str
    component: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    input_text: Optional[str] = None
    position: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            "operation": self.operation,
            "component": self.component,
            "timestamp": self.timestamp.isoformat(),
            "input_text": self.input_text,
            "position": self.position,
            "metadata": self.metadata,
        }


class BibleRefError(Exception):
    """
    Base exception for all bibleref errors.

    Provides:
    - Structured error context
    - Severity level
    - Chained exception support
    """

    default_severity: ErrorSeverity = ErrorSeverity.WARNING
    error_code: str = "BIBLEREF_ERROR"

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        severity: Optional[ErrorSeverity] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = True,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.severity = severity or self.default_severity
        self.cause = cause
        self.recoverable = recoverable
        self.suggestions = suggestions or []
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON output."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.to_dict() if self.context else None,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context and self.context.position is not None:
            parts.append(f" (at position {self.context.position})")
        if self.cause:
            parts.append(f" [caused by: {self.cause}]")
        return "".join(parts)

    def with_context(self, **kwargs: Any) -> "BibleRefError":
        """Add additional context to the error."""
        if self.context:
            self.context.metadata.update(kwargs)
        else:
            self.context = ErrorContext(
                operation="unknown",
                component="unknown",
                metadata=kwargs,
            )
        return self


class ReferenceSyntaxError(BibleRefError):
    """Text contains characters the tokenizer cannot read."""

    error_code = "SYNTAX_ERROR"

    def __init__(self, message: str, position: Optional[int] = None, **kwargs: Any):
        kwargs.setdefault(
            "suggestions",
            ["Write references like 'Genesis 1:1' or 'Matthew 1 - Jude 12'"],
        )
        super().__init__(message, **kwargs)
        self.position = position


class ReferenceShapeError(BibleRefError):
    """Tokens do not form a recognized reference."""

    error_code = "SHAPE_ERROR"


class ReferenceOrderError(BibleRefError):
    """End of the range comes before its start."""

    error_code = "ORDER_ERROR"


class ReferenceBoundsError(BibleRefError):
    """Chapter or verse does not exist in the book."""

    error_code = "BOUNDS_ERROR"


class ReferenceCodecError(BibleRefError):
    """Integer pair does not describe a reference."""

    error_code = "CODEC_ERROR"


class ConfigurationError(BibleRefError):
    """Configuration-related errors."""

    error_code = "CONFIG_ERROR"
    default_severity = ErrorSeverity.CRITICAL

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        actual_value: Any = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("recoverable", False)
        super().__init__(message, **kwargs)
        self.config_key = config_key
        self.actual_value = actual_value


ERROR_KIND_MAP: Dict[ErrorKind, Type[BibleRefError]] = {
    ErrorKind.SYNTAX: ReferenceSyntaxError,
    ErrorKind.SHAPE: ReferenceShapeError,
    ErrorKind.ORDER: ReferenceOrderError,
    ErrorKind.BOUNDS: ReferenceBoundsError,
    ErrorKind.CODEC: ReferenceCodecError,
}


def error_for(err: Err, input_text: Optional[str] = None) -> BibleRefError:
    """Build the exception matching a failed result."""
    context = ErrorContext(
        operation=err.kind.value,
        component="bibleref",
        input_text=input_text,
        position=err.position,
    )
    error_type = ERROR_KIND_MAP[err.kind]
    if error_type is ReferenceSyntaxError:
        return ReferenceSyntaxError(err.error, position=err.position, context=context)
    return error_type(err.error, context=context)
