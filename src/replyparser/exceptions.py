"""Exceptions for replyparser."""

from dataclasses import dataclass


class ReplyParserError(Exception):
    """Base exception for all reply parsing errors."""

    pass


@dataclass
class InvalidInputError(ReplyParserError):
    """Input is not valid for processing.

    Raised when the email body is not text (e.g. undecoded bytes).
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LineTooLongError(ReplyParserError):
    """A line exceeds the maximum supported scan length.

    Attributes:
        message: Description of the error.
        line_number: 1-based number of the offending line.
        length: Length of the line in characters.
        limit: The configured maximum line length.
    """

    message: str
    line_number: int
    length: int
    limit: int

    def __str__(self) -> str:
        return f"{self.message} (line {self.line_number}: {self.length} characters, limit: {self.limit})"
