"""Pattern databases for reply, quote and signature detection."""

from replyparser.patterns.headers import (
    UNDERSCORE_DELIMITER_PATTERN,
    find_reply_header_spans,
    is_nested_header_span,
)
from replyparser.patterns.quotes import is_quote_header_line, is_quoted_line
from replyparser.patterns.signatures import is_signature_line

__all__ = [
    "UNDERSCORE_DELIMITER_PATTERN",
    "find_reply_header_spans",
    "is_nested_header_span",
    "is_quote_header_line",
    "is_quoted_line",
    "is_signature_line",
]
