"""Tests for the Email aggregate."""

from replyparser import Email, Fragment


def _fragment(content: str, *, hidden: bool = False, quoted: bool = False, signature: bool = False) -> Fragment:
    """Create a Fragment with default flags."""
    return Fragment(content=content, quoted=quoted, signature=signature, hidden=hidden)


class TestVisibleText:
    """Visible text assembly tests."""

    def test_joins_visible_fragments(self) -> None:
        """Visible fragments are joined with newlines, trailing space stripped."""
        email = Email(
            fragments=(
                _fragment("Hi\n"),
                _fragment("> q", hidden=True, quoted=True),
                _fragment("  Bye \n\n"),
            )
        )

        assert email.visible_text() == "Hi\n\n  Bye"

    def test_leading_whitespace_preserved(self) -> None:
        """Only the end of the result is stripped."""
        email = Email(fragments=(_fragment("\n  Indented"),))

        assert email.visible_text() == "\n  Indented"

    def test_empty_email(self) -> None:
        """An email without fragments has empty visible text."""
        assert Email(fragments=()).visible_text() == ""

    def test_all_hidden(self) -> None:
        """An email with only hidden fragments has empty visible text."""
        email = Email(fragments=(_fragment("> q", hidden=True, quoted=True),))

        assert email.visible_text() == ""


class TestEmailViews:
    """Convenience views over fragments."""

    def test_flags(self) -> None:
        """Quote and signature presence are reported."""
        email = Email(
            fragments=(
                _fragment("Hi"),
                _fragment("> q", hidden=True, quoted=True),
                _fragment("--\nme", hidden=True, signature=True),
            )
        )

        assert email.has_quotes is True
        assert email.has_signature is True
        assert len(email) == 3
        assert [fragment.content for fragment in email] == ["Hi", "> q", "--\nme"]
        assert email.visible_fragments == (_fragment("Hi"),)

    def test_plain_email(self) -> None:
        """A plain email has neither quotes nor signature."""
        email = Email(fragments=(_fragment("Hi"),))

        assert email.has_quotes is False
        assert email.has_signature is False

    def test_fragment_str(self) -> None:
        """str() of a fragment is its content."""
        assert str(_fragment("Hello")) == "Hello"
