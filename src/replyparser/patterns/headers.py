"""Reply header and delimiter patterns for preprocessing.

These work on the whole normalized text in natural orientation.

A reply header is "On" plus whitespace at the start of a line, followed
(possibly across several lines) by "wrote:" at the end of a line. Mail
clients wrap long headers, so a header may span more than one line:

    On Fri, Nov 16, 2012 at 1:48 PM, Some Person <
    person@example.com> wrote:
"""

import re
from bisect import bisect_left
from collections.abc import Iterator

_HEADER_START_PATTERN = re.compile(r"^On\s", re.MULTILINE)
_HEADER_END_PATTERN = re.compile(r"wrote:$", re.MULTILINE)
_NESTED_START_PATTERN = re.compile(r"On\s")

_START_LENGTH = len("On ")
_END_LENGTH = len("wrote:")

# "On" + whitespace, at least one character, then "wrote:"
_MIN_HEADER_LENGTH = _START_LENGTH + 1 + _END_LENGTH

# Outlook-style underscore line directly below a non-empty line
UNDERSCORE_DELIMITER_PATTERN = re.compile(r"([^\n])(\n_{7,})$", re.MULTILINE)


def find_reply_header_spans(text: str) -> Iterator[tuple[int, int]]:
    """Find candidate reply header spans, left to right, without overlap.

    Each span runs from an "On" line start to the nearest "wrote:" line end
    that leaves at least one character in between. The "wrote:" endings are
    indexed once and each start is resolved with a binary search, so the
    scan stays linear no matter how many lines start with "On".

    Args:
        text: Normalized email text.

    Yields:
        (start, end) offsets of each candidate span.
    """
    header_ends = [match.end() for match in _HEADER_END_PATTERN.finditer(text)]
    if not header_ends:
        return

    position = 0
    for start_match in _HEADER_START_PATTERN.finditer(text):
        start = start_match.start()
        if start < position:
            continue

        index = bisect_left(header_ends, start + _MIN_HEADER_LENGTH)
        if index == len(header_ends):
            # No later start can reach a "wrote:" either
            return

        position = header_ends[index]
        yield start, position


def is_nested_header_span(span: str) -> bool:
    """Check if a header span swallowed a second reply header.

    A span such as "On your host you can run: ... On 9 Jan, Bob wrote:"
    contains another "On" + whitespace followed by at least one character
    before the closing "wrote:". Such spans are left untouched.

    Args:
        span: Text of a span returned by find_reply_header_spans.

    Returns:
        True if the span contains a second reply header.
    """
    match = _NESTED_START_PATTERN.search(span, 2)
    if match is None:
        return False

    return match.start() <= len(span) - _MIN_HEADER_LENGTH
