"""
Data models and token vocabulary for the m2h converter.
"""
from dataclasses import dataclass

DEFAULT_LOCALE = "en-US"


@dataclass
class ProcessorOptions:
    """
    Per-call options for :func:`m2h.converter.m2h`.
    """
    locale: str = DEFAULT_LOCALE


class TokenType:
    """Token types the notecard transform reads or writes."""
    BLOCKQUOTE_OPEN = "blockquote_open"
    BLOCKQUOTE_CLOSE = "blockquote_close"
    PARAGRAPH_OPEN = "paragraph_open"
    PARAGRAPH_CLOSE = "paragraph_close"
    INLINE = "inline"
    MACRO = "macro"
    NOTECARD_OPEN = "notecard_open"
    NOTECARD_CLOSE = "notecard_close"
    NOOP = "noop"


class NotecardType:
    """Canonical (English) notecard kinds, also used as CSS class names."""
    NOTE = "note"
    WARNING = "warning"
    CALLOUT = "callout"

    ALL = (NOTE, WARNING, CALLOUT)
