"""Fragment segmentation state machine.

Replies are quoted and signed at the bottom of an email, so the body is
scanned bottom-up: the whole text is reversed (line order and character
order) and walked line by line. A marker that opens a line in the
original text then sits at the end of the scanned line, and every
boundary rule is an end-of-line match.

Each fragment's text is reversed back when it is finalized, and the
fragment list is reversed at the end to restore top-to-bottom order.
"""

import logging
from dataclasses import dataclass, field

from replyparser.exceptions import LineTooLongError
from replyparser.patterns.quotes import is_quote_header_line, is_quoted_line
from replyparser.patterns.signatures import is_signature_line
from replyparser.pipeline.classifier import VisibilityClassifier
from replyparser.pipeline.fragment import Fragment

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINE_LENGTH = 64 * 1024


def reverse_text(text: str) -> str:
    """Reverse a string code point by code point.

    Combining sequences are not kept together, but reversing twice
    restores the original text exactly.
    """
    return text[::-1]


@dataclass(slots=True)
class _OpenFragment:
    """Fragment still receiving lines (reversed orientation)."""

    quoted: bool
    lines: list[str] = field(default_factory=list)
    signature: bool = False

    def accepts(self, line: str, is_quoted: bool) -> bool:
        """Whether a reversed line continues this fragment.

        Blank lines and "On ... wrote:" headers stay with a quoted block.
        """
        if self.quoted == is_quoted:
            return True

        return self.quoted and (line == "" or is_quote_header_line(line))

    def ends_with_signature_delimiter(self) -> bool:
        return bool(self.lines) and is_signature_line(self.lines[-1])


class FragmentSegmenter:
    """Splits preprocessed email text into classified fragments.

    Per reversed line:
    1. Strip leading whitespace unless the line is a signature delimiter
    2. A blank line closes an open fragment ending in a signature delimiter
    3. The line continues the open fragment or starts a new one
    """

    def __init__(self, *, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> None:
        """Initialize the segmenter.

        Args:
            max_line_length: Longest line, in characters, accepted for scanning.

        Raises:
            ValueError: If max_line_length is not positive.
        """
        if max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {max_line_length}")

        self._max_line_length = max_line_length

    @property
    def max_line_length(self) -> int:
        """Longest line accepted for scanning."""
        return self._max_line_length

    def segment(self, text: str) -> tuple[Fragment, ...]:
        """Segment text into fragments in top-to-bottom order.

        Args:
            text: Preprocessed email text.

        Returns:
            Tuple of finalized fragments.

        Raises:
            LineTooLongError: If a line exceeds the maximum line length.
        """
        if not text:
            return ()

        self._check_line_lengths(text)

        classifier = VisibilityClassifier()
        fragments: list[Fragment] = []
        current: _OpenFragment | None = None

        for line in reverse_text(text).split("\n"):
            if not is_signature_line(line):
                line = line.lstrip()

            is_quoted = is_quoted_line(line)

            if current is not None and line == "" and current.ends_with_signature_delimiter():
                current.signature = True
                fragments.append(self._finish(current, classifier))
                current = None

            if current is not None and current.accepts(line, is_quoted):
                current.lines.append(line)
            else:
                if current is not None:
                    fragments.append(self._finish(current, classifier))
                current = _OpenFragment(quoted=is_quoted, lines=[line])

        if current is not None:
            fragments.append(self._finish(current, classifier))

        fragments.reverse()
        logger.debug("Segmented body into %d fragments", len(fragments))
        return tuple(fragments)

    def _finish(self, open_fragment: _OpenFragment, classifier: VisibilityClassifier) -> Fragment:
        """Finalize an open fragment and classify it."""
        content = reverse_text("\n".join(open_fragment.lines))
        hidden = classifier.classify(
            content,
            quoted=open_fragment.quoted,
            signature=open_fragment.signature,
        )

        return Fragment(
            content=content,
            quoted=open_fragment.quoted,
            signature=open_fragment.signature,
            hidden=hidden,
        )

    def _check_line_lengths(self, text: str) -> None:
        """Reject text containing a line longer than the configured limit."""
        if len(text) <= self._max_line_length:
            return

        for index, line in enumerate(text.split("\n")):
            if len(line) > self._max_line_length:
                logger.warning(
                    "Line %d is %d characters long, limit is %d",
                    index + 1,
                    len(line),
                    self._max_line_length,
                )
                raise LineTooLongError(
                    message="Line too long",
                    line_number=index + 1,
                    length=len(line),
                    limit=self._max_line_length,
                )
