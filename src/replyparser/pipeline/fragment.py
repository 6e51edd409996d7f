"""Fragment value type produced by segmentation."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fragment:
    """A contiguous block of an email body treated as one unit.

    Attributes:
        content: Text of the fragment in natural orientation.
        quoted: The block is quoted reply text (lines start with ``>``).
        signature: The block is a signature (delimiter and what follows it).
        hidden: The block is left out of the visible reply.
    """

    content: str
    quoted: bool
    signature: bool
    hidden: bool

    @property
    def is_blank(self) -> bool:
        """Whether the content is whitespace only."""
        return not self.content.strip()

    def __str__(self) -> str:
        return self.content
