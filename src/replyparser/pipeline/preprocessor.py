"""Text preprocessing ahead of segmentation.

Handles:
- Line ending normalization
- Collapsing multi-line reply headers onto one line
- Detaching underscore signature delimiters from the text above them
"""

import logging
from dataclasses import dataclass

from replyparser.patterns.headers import (
    UNDERSCORE_DELIMITER_PATTERN,
    find_reply_header_spans,
    is_nested_header_span,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PreprocessedBody:
    """Result of preprocessing an email body.

    Attributes:
        text: Normalized text ready for segmentation.
        collapsed_headers: Number of multi-line reply headers joined onto one line.
        detached_delimiters: Number of underscore delimiters moved below a blank line.
    """

    text: str
    collapsed_headers: int
    detached_delimiters: int


class Preprocessor:
    """Rewrites an email body into line-matchable form.

    Applies the following transformations:
    1. Line ending normalization (CRLF/CR → LF)
    2. Multi-line "On ... wrote:" headers joined with spaces
    3. Blank line inserted above an underscore delimiter glued to text
    """

    def preprocess(self, text: str) -> PreprocessedBody:
        """Preprocess email body text.

        Args:
            text: Email body as a string.

        Returns:
            PreprocessedBody with the rewritten text.
        """
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        text, collapsed_headers = self._collapse_reply_headers(text)

        text, detached_delimiters = UNDERSCORE_DELIMITER_PATTERN.subn(r"\1\n\2", text)

        if collapsed_headers or detached_delimiters:
            logger.debug(
                "Preprocessed body: %d reply headers collapsed, %d delimiters detached",
                collapsed_headers,
                detached_delimiters,
            )

        return PreprocessedBody(
            text=text,
            collapsed_headers=collapsed_headers,
            detached_delimiters=detached_delimiters,
        )

    def _collapse_reply_headers(self, text: str) -> tuple[str, int]:
        """Join reply headers that were wrapped over several lines.

        Spans that swallowed a second header are skipped.

        Args:
            text: Text with normalized line endings.

        Returns:
            Tuple of (rewritten text, number of headers collapsed).
        """
        pieces: list[str] = []
        last_end = 0
        collapsed = 0

        for start, end in find_reply_header_spans(text):
            span = text[start:end]
            if "\n" not in span or is_nested_header_span(span):
                continue

            pieces.append(text[last_end:start])
            pieces.append(span.replace("\n", " "))
            last_end = end
            collapsed += 1

        if not collapsed:
            return text, 0

        pieces.append(text[last_end:])
        return "".join(pieces), collapsed
