"""replyparser - Extract the visible reply from email bodies."""

from replyparser.exceptions import (
    InvalidInputError,
    LineTooLongError,
    ReplyParserError,
)
from replyparser.message import Email
from replyparser.parser import (
    ReplyParser,
    extract_visible_reply,
    parse,
    parse_file,
)
from replyparser.pipeline import (
    DEFAULT_MAX_LINE_LENGTH,
    Fragment,
    FragmentSegmenter,
    PreprocessedBody,
    Preprocessor,
    VisibilityClassifier,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "Email",
    "Fragment",
    "FragmentSegmenter",
    "InvalidInputError",
    "LineTooLongError",
    "PreprocessedBody",
    "Preprocessor",
    "ReplyParser",
    "ReplyParserError",
    "VisibilityClassifier",
    "extract_visible_reply",
    "parse",
    "parse_file",
]
