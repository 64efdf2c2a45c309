"""Tests for file dialog filter detection and splitting."""

from __future__ import annotations

from hypothesis import given

from rc2po.syntax import NOT_A_FILTER, split_filter
from tests.strategies import captions


class TestSplitFilter:
    """Filter strings are split into their descriptions."""

    def test_two_pairs(self) -> None:
        """Descriptions keep their extension hint, patterns are dropped."""
        text = r"Text files (*.txt)\0*.txt\0All files (*.*)\0*.*\0"
        assert split_filter(text) == ("Text files (*.txt)", "All files (*.*)")

    def test_single_pair(self) -> None:
        text = r"Floppy images (*.86F;*.IMG)\0*.86F;*.IMG\0"
        assert split_filter(text) == ("Floppy images (*.86F;*.IMG)",)

    def test_fragments_trimmed(self) -> None:
        """Whitespace around descriptions is stripped."""
        text = r"  Images (*.img)\0*.img\0   Raw (*.raw)\0*.raw\0  "
        assert split_filter(text) == ("Images (*.img)", "Raw (*.raw)")

    def test_trailing_text_kept(self) -> None:
        """Text after the last pair is a fragment of its own."""
        text = r"Images (*.img)\0*.img\0 trailing"
        assert split_filter(text) == ("Images (*.img)", "trailing")

    def test_nested_parentheses_in_description(self) -> None:
        text = r"CD-ROM images (ISO) (*.iso)\0*.iso\0"
        assert split_filter(text) == ("CD-ROM images (ISO) (*.iso)",)

    def test_bare_extension_hint_is_description(self) -> None:
        """A pair with no leading text still yields its parenthesized hint."""
        result = split_filter(r"(*.*)\0*.*\0")
        assert result is not NOT_A_FILTER
        assert result == ("(*.*)",)

    def test_whitespace_only_fragments_dropped(self) -> None:
        result = split_filter(r"A (*.a)\0*.a\0   B (*.b)\0*.b\0   ")
        assert result == ("A (*.a)", "B (*.b)")


class TestNotAFilter:
    """Ordinary strings are reported as NOT_A_FILTER."""

    def test_plain_text(self) -> None:
        assert split_filter("Hard disk") is NOT_A_FILTER

    def test_parentheses_without_separator(self) -> None:
        """Parentheses alone do not make a filter."""
        assert split_filter("Settings (advanced)") is NOT_A_FILTER

    def test_separator_without_parentheses(self) -> None:
        assert split_filter(r"All\0*.*\0") is NOT_A_FILTER

    def test_missing_closing_separator(self) -> None:
        """The extension pattern must be terminated by a second separator."""
        assert split_filter(r"Images (*.img)\0*.img") is NOT_A_FILTER

    def test_real_nul_is_not_separator(self) -> None:
        """Separators are the two-character escape, not NUL characters."""
        assert split_filter("Images (*.img)\x00*.img\x00") is NOT_A_FILTER

    @given(captions)
    def test_captions_are_never_filters(self, text: str) -> None:
        """Backslash-free text can never contain a separator."""
        assert split_filter(text) is NOT_A_FILTER
