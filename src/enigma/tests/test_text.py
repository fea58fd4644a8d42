"""Tests for message text preparation."""

import pytest

from enigma.core.errors import FormatError
from enigma.text import group_text, pad_to_group, prepare_text


class TestPrepareText:
    """Test normalization."""

    def test_uppercase_and_whitespace(self):
        assert prepare_text("hello world\n") == "HELLOWORLD"

    def test_umlauts(self):
        assert prepare_text("Äpfel über Öl") == "AEPFELUEBEROEL"

    def test_numbers(self):
        assert prepare_text("U 96", translate_numbers=True) == "UNEUNSECHS"

    def test_all_digits(self):
        assert prepare_text("0123456789", translate_numbers=True) == (
            "NULLEINSZWEIDREIVIERFUNFSECHSSIEBENACHTNEUN"
        )

    def test_filter(self):
        assert prepare_text("Hallo, Welt! 42", filter_invalid=True) == "HALLOWELT"

    def test_invalid_without_filter(self):
        with pytest.raises(FormatError):
            prepare_text("Hallo, Welt")

    def test_digits_without_translation(self):
        with pytest.raises(FormatError):
            prepare_text("U96")

    def test_empty(self):
        assert prepare_text("   \n") == ""


class TestGrouping:
    """Test padding and group formatting."""

    def test_pad(self):
        padded = pad_to_group("ABCDEFG")
        assert len(padded) == 10
        assert padded.startswith("ABCDEFG")
        assert padded.isalpha() and padded.isupper()

    def test_pad_exact(self):
        assert pad_to_group("ABCDE") == "ABCDE"

    def test_group(self):
        assert group_text("ABCDEFGHIJKL") == "ABCDE FGHIJ KL"

    def test_group_lines(self):
        """Ten groups per line."""
        text = "A" * 55
        lines = group_text(text).split("\n")
        assert len(lines) == 2
        assert len(lines[0].split()) == 10
        assert lines[1] == "AAAAA"

    def test_group_custom_size(self):
        assert group_text("ABCDEF", size=2, per_line=2) == "AB CD\nEF"
