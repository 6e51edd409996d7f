"""Tests for the pattern modules."""

import time

import pytest

from replyparser.patterns import (
    UNDERSCORE_DELIMITER_PATTERN,
    find_reply_header_spans,
    is_nested_header_span,
    is_quote_header_line,
    is_quoted_line,
    is_signature_line,
)
from replyparser.pipeline.segmenter import reverse_text


class TestQuotedLine:
    """Quote marker detection on reversed lines."""

    def test_single_marker(self) -> None:
        """A line starting with > is quoted."""
        assert is_quoted_line(reverse_text("> like this")) is True

    def test_nested_markers(self) -> None:
        """Several markers are still quoted."""
        assert is_quoted_line(reverse_text(">> nested")) is True

    def test_bare_marker(self) -> None:
        """A line holding only > is quoted."""
        assert is_quoted_line(">") is True

    def test_plain_line(self) -> None:
        """A plain line is not quoted."""
        assert is_quoted_line(reverse_text("like this")) is False

    def test_marker_inside_line(self) -> None:
        """A > in the middle of a line does not count."""
        assert is_quoted_line(reverse_text("a > b")) is False

    def test_long_marker_run_is_fast(self) -> None:
        """A long run of markers not at the line end is checked quickly."""
        start = time.perf_counter()
        result = is_quoted_line(">" * 60_000 + "x")
        elapsed = time.perf_counter() - start

        assert result is False
        assert elapsed < 1.0


class TestQuoteHeaderLine:
    """Reply attribution header detection on reversed lines."""

    def test_reply_header(self) -> None:
        """An "On ... wrote:" line is a header."""
        assert is_quote_header_line(reverse_text("On Jan 1, 2013, Bob wrote:")) is True

    def test_other_verb(self) -> None:
        """The line must end with "wrote:"."""
        assert is_quote_header_line(reverse_text("On Jan 1, 2013, Bob said:")) is False

    def test_missing_on(self) -> None:
        """The line must start with "On"."""
        assert is_quote_header_line(reverse_text("Bob wrote:")) is False


class TestSignatureLine:
    """Signature delimiter detection on reversed lines."""

    @pytest.mark.parametrize(
        "line",
        [
            "--",
            "-- ",
            "__",
            "________________________________",
            "-Abhishek Kona",
            "Sent from my iPhone",
            "Sent from my BlackBerry",
            "Sent from my Verizon Wireless BlackBerry",
        ],
    )
    def test_signature_lines(self, line: str) -> None:
        """Delimiters and mobile boilerplate are signatures."""
        assert is_signature_line(reverse_text(line)) is True

    @pytest.mark.parametrize(
        "line",
        [
            "Hello",
            "",
            "Sent from my desk, is much easier then my mobile phone.",
            "Sent from my one two three four",
            "And here is a fix -- this is not a signature.",
            "   - how about bullets",
            "- a dash then a space",
        ],
    )
    def test_non_signature_lines(self, line: str) -> None:
        """Ordinary text is not a signature."""
        assert is_signature_line(reverse_text(line)) is False

    def test_long_line_is_fast(self) -> None:
        """A long run of word characters does not backtrack."""
        assert is_signature_line("a" * 50_000 + " ym morf tneX") is False


class TestReplyHeaderSpans:
    """Reply header span finding."""

    def test_single_line_header(self) -> None:
        """A one-line header spans exactly that line."""
        text = "On Mon, Bob wrote:\n> hi"
        spans = list(find_reply_header_spans(text))

        assert spans == [(0, len("On Mon, Bob wrote:"))]

    def test_wrapped_header(self) -> None:
        """A header wrapped over two lines is one span."""
        text = "Hi\n\nOn Fri, Bob <\nbob@example.com> wrote:\n> x"
        spans = list(find_reply_header_spans(text))

        assert len(spans) == 1
        start, end = spans[0]
        assert text[start:end] == "On Fri, Bob <\nbob@example.com> wrote:"

    def test_spans_do_not_overlap(self) -> None:
        """Each header after the first starts after the previous span."""
        text = "On Mon, A\nwrote:\n> x\n\nOn Tue, B\nwrote:\n>> y"
        spans = list(find_reply_header_spans(text))

        assert [text[start:end] for start, end in spans] == [
            "On Mon, A\nwrote:",
            "On Tue, B\nwrote:",
        ]

    def test_no_wrote(self) -> None:
        """Without "wrote:" there is no span."""
        assert list(find_reply_header_spans("On a\n" * 1000)) == []

    def test_needs_text_between(self) -> None:
        """At least one character must sit between "On " and "wrote:"."""
        assert list(find_reply_header_spans("On wrote:")) == []

    def test_on_must_start_line(self) -> None:
        """"On" inside a line does not start a header."""
        assert list(find_reply_header_spans("Later On Monday Bob wrote:")) == []


class TestNestedHeaderSpan:
    """Detection of spans that swallowed a second header."""

    def test_nested(self) -> None:
        """A span holding two headers is nested."""
        span = "On your host run:\n\nOn 9 Jan 2014, Bob wrote:"
        assert is_nested_header_span(span) is True

    def test_wrapped_header_is_not_nested(self) -> None:
        """A single wrapped header is not nested."""
        span = "On Fri, Some Person <\nperson@example.com> wrote:"
        assert is_nested_header_span(span) is False

    def test_lowercase_on_is_ignored(self) -> None:
        """Only a capitalized "On" counts."""
        assert is_nested_header_span("On Monday, Jon on\nwrote:") is False


class TestUnderscoreDelimiter:
    """Underscore delimiter pattern."""

    def test_matches_glued_delimiter(self) -> None:
        """Seven or more underscores below text match."""
        assert UNDERSCORE_DELIMITER_PATTERN.search("reply\n_______") is not None

    def test_short_run(self) -> None:
        """Six underscores are not a delimiter."""
        assert UNDERSCORE_DELIMITER_PATTERN.search("reply\n______") is None

    def test_already_separated(self) -> None:
        """A delimiter below a blank line does not match."""
        assert UNDERSCORE_DELIMITER_PATTERN.search("reply\n\n________") is None
