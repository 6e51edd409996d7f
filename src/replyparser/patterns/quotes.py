"""Quote marker and reply header detection.

Lines are matched in reversed orientation (characters in reverse order),
so markers that open a line in the original text sit at the end of the
scanned line.
"""

import re

# "On <date>, <name> wrote:" reversed
_QUOTE_HEADER_PATTERN = re.compile(r"^:etorw.*nO$")


def is_quoted_line(line: str) -> bool:
    """Check if a reversed line is quoted reply text.

    Args:
        line: A single line in reversed orientation.

    Returns:
        True if the original line starts with one or more ``>`` markers.
    """
    # ">+$" as a search retries every position of a long marker run
    return line.endswith(">")


def is_quote_header_line(line: str) -> bool:
    """Check if a reversed line is a reply attribution header.

    Args:
        line: A single line in reversed orientation.

    Returns:
        True if the original line starts with "On" and ends with "wrote:".
    """
    return _QUOTE_HEADER_PATTERN.match(line) is not None
