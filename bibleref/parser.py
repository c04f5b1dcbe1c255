"""
bibleref - Reference Parsing

Entry point from text: trim, lower-case, tokenize, resolve. The whole
input must be one reference; trailing text is an error, not ignored.
"""
from __future__ import annotations

from .observability.logging import get_logger
from .reference import Reference
from .resolver import resolve
from .result import Result
from .tokenizer import tokenize

logger = get_logger(__name__)


def from_string(text: str) -> Result[Reference]:
    """
    Parse exactly one reference.

    >>> from_string("Jude 32").error
    'Jude only has 25 verses'
    """
    normalized = text.strip().lower()
    tokens = tokenize(normalized)
    if tokens.is_err:
        result = tokens
    else:
        result = resolve(tokens.value)

    if result.is_err:
        logger.debug(
            "Reference rejected",
            input=text,
            error=result.error,
            kind=result.kind.value,
            position=result.position,
        )
    return result
