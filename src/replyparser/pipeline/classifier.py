"""Visibility classification for finalized fragments.

Fragments are classified bottom-up, in the order the segmenter finalizes
them. Quoted text, signatures and blank blocks at the bottom of an email
are hidden until the first block of real reply text is found; everything
above that block stays visible.
"""


class VisibilityClassifier:
    """Decides the hidden flag of each fragment as it is finalized.

    Holds the "found visible" cursor for a single parse. Create a new
    instance per parse.
    """

    def __init__(self) -> None:
        self._found_visible = False

    @property
    def found_visible(self) -> bool:
        """Whether a visible fragment has been classified yet."""
        return self._found_visible

    def classify(self, content: str, *, quoted: bool, signature: bool) -> bool:
        """Classify one fragment.

        Args:
            content: Fragment text.
            quoted: Whether the fragment is quoted.
            signature: Whether the fragment is a signature.

        Returns:
            True if the fragment is hidden.
        """
        if self._found_visible:
            return False

        if quoted or signature or not content.strip():
            return True

        self._found_visible = True
        return False
