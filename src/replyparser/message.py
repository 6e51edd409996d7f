"""Email aggregate holding the fragments of one parsed body."""

from collections.abc import Iterator
from dataclasses import dataclass

from replyparser.pipeline.fragment import Fragment


@dataclass(frozen=True, slots=True)
class Email:
    """A parsed email body.

    Attributes:
        fragments: Fragments in top-to-bottom order of the source text.
    """

    fragments: tuple[Fragment, ...]

    @property
    def visible_fragments(self) -> tuple[Fragment, ...]:
        """Fragments that make up the visible reply."""
        return tuple(fragment for fragment in self.fragments if not fragment.hidden)

    @property
    def has_quotes(self) -> bool:
        """Whether any fragment is quoted."""
        return any(fragment.quoted for fragment in self.fragments)

    @property
    def has_signature(self) -> bool:
        """Whether any fragment is a signature."""
        return any(fragment.signature for fragment in self.fragments)

    def visible_text(self) -> str:
        """Assemble the visible reply.

        Joins non-hidden fragments with newlines and strips trailing
        whitespace from the end of the result. Leading and interior
        whitespace is kept as is.

        Returns:
            The visible reply text.
        """
        return "\n".join(fragment.content for fragment in self.visible_fragments).rstrip()

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)
