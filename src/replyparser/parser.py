"""ReplyParser - Main public interface for reply extraction.

Provides:
- parse(): Full structured result with every fragment
- parse_reply(): Visible reply text, raises on failure
- parse_reply_safe(): Visible reply text, returns None on failure
- parse_file(): Parse a body stored on disk
"""

import logging
from pathlib import Path

from replyparser.exceptions import InvalidInputError, ReplyParserError
from replyparser.message import Email
from replyparser.pipeline.preprocessor import Preprocessor
from replyparser.pipeline.segmenter import DEFAULT_MAX_LINE_LENGTH, FragmentSegmenter

logger = logging.getLogger(__name__)


class ReplyParser:
    """Extracts the visible reply from email bodies.

    The parsing pipeline:
    1. Preprocess text (line endings, reply headers, delimiters)
    2. Segment reversed text into fragments, classifying each one
    3. Assemble the Email from fragments in top-to-bottom order

    A parser holds no per-parse state and can be shared between threads.

    Example:
        parser = ReplyParser()

        # Structured result
        email = parser.parse(body)
        for fragment in email.fragments:
            print(fragment.quoted, fragment.signature, fragment.hidden)

        # Visible reply only
        reply = parser.parse_reply(body)
    """

    def __init__(self, *, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> None:
        """Initialize the parser.

        Args:
            max_line_length: Longest line, in characters, accepted for scanning.
        """
        self._preprocessor = Preprocessor()
        self._segmenter = FragmentSegmenter(max_line_length=max_line_length)

    @property
    def max_line_length(self) -> int:
        """Longest line accepted for scanning."""
        return self._segmenter.max_line_length

    def parse(self, text: str) -> Email:
        """Parse an email body into fragments.

        Args:
            text: Email body, already decoded to text.

        Returns:
            Email with fragments in top-to-bottom order.

        Raises:
            InvalidInputError: If text is not a string.
            LineTooLongError: If a line exceeds the maximum line length.
        """
        if not isinstance(text, str):
            raise InvalidInputError(message=f"Expected str, got {type(text).__name__}")

        preprocessed = self._preprocessor.preprocess(text)
        fragments = self._segmenter.segment(preprocessed.text)

        return Email(fragments=fragments)

    def parse_reply(self, text: str) -> str:
        """Extract the visible reply from an email body.

        Args:
            text: Email body, already decoded to text.

        Returns:
            The visible reply text.

        Raises:
            InvalidInputError: If text is not a string.
            LineTooLongError: If a line exceeds the maximum line length.
        """
        return self.parse(text).visible_text()

    def parse_reply_safe(self, text: str) -> str | None:
        """Extract the visible reply, returning None on failure.

        Args:
            text: Email body.

        Returns:
            The visible reply text, or None if parsing failed.
        """
        try:
            return self.parse_reply(text)
        except ReplyParserError:
            logger.exception("Reply parsing failed")
            return None

    def parse_file(self, path: Path | str, encoding: str = "utf-8") -> Email:
        """Parse an email body stored in a file.

        Line endings are read untranslated and normalized by the parser.

        Args:
            path: Path to the file holding the body.
            encoding: Text encoding of the file.

        Returns:
            Email with fragments in top-to-bottom order.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid in the given encoding.
            LineTooLongError: If a line exceeds the maximum line length.
        """
        with open(path, encoding=encoding, newline="") as f:
            text = f.read()

        return self.parse(text)


_default_parser = ReplyParser()


def parse(text: str) -> Email:
    """Parse an email body with default settings."""
    return _default_parser.parse(text)


def extract_visible_reply(text: str) -> str:
    """Extract the visible reply from an email body with default settings."""
    return _default_parser.parse_reply(text)


def parse_file(path: Path | str, encoding: str = "utf-8") -> Email:
    """Parse an email body stored in a file with default settings."""
    return _default_parser.parse_file(path, encoding=encoding)
