"""Signature delimiter detection.

Lines are matched in reversed orientation. A signature line in the
original text starts with one of:
- ``--`` or ``__`` with nothing but whitespace after it
- a hyphen glued to a name (``-Abhishek``)
- "Sent from my" followed by one to three words, filling the whole line
"""

import re

_DELIMITER_PATTERN = re.compile(r"(?:--|__)\s*$|\w-$")

# Word runs alternate with whitespace runs so a failed match cannot
# backtrack through every way of splitting a long word.
_MOBILE_SIGNATURE_PATTERN = re.compile(r"\w+(?:\s+\w+){0,2}\s* ym morf tneS")


def is_signature_line(line: str) -> bool:
    """Check if a reversed line is a signature delimiter.

    Args:
        line: A single line in reversed orientation.

    Returns:
        True if the line opens a signature block in the original text.
    """
    if _DELIMITER_PATTERN.search(line):
        return True

    return _MOBILE_SIGNATURE_PATTERN.fullmatch(line) is not None
