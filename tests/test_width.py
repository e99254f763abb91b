"""
Tests for the width classifier.

Checks zero, narrow and wide classification and argument validation.
"""

import pytest

from termcells.width import WidthClass, char_width, classify


class TestZeroWidth:
    """Characters that occupy no cells."""

    @pytest.mark.parametrize("ch", [
        chr(0x00),
        "\t",
        "\n",
        chr(0x7F),
        "\N{COMBINING ACUTE ACCENT}",
        "\N{COMBINING ENCLOSING CIRCLE}",
        "\N{ZERO WIDTH SPACE}",
        "\N{ZERO WIDTH JOINER}",
        "\N{SOFT HYPHEN}",
        "\N{VARIATION SELECTOR-16}",
        "\N{ZERO WIDTH NO-BREAK SPACE}",
        "\N{LINE SEPARATOR}",
        "\N{HANGUL JUNGSEONG FILLER}",
        "\N{HANGUL JONGSEONG KIYEOK}",
    ])
    def test_zero_width(self, ch):
        """Control, format, combining and ignorable characters are zero width."""
        assert classify(ch) is WidthClass.ZERO
        assert char_width(ch) == 0

    def test_tag_characters_are_ignorable(self):
        """Plane 14 tag characters are default ignorable."""
        assert char_width(0xE0041) == 0


class TestWideWidth:
    """East-Asian wide and fullwidth characters."""

    @pytest.mark.parametrize("code", [
        0x4E2D,    # CJK ideograph
        0x3042,    # hiragana a
        0xD55C,    # hangul syllable
        0xFF21,    # fullwidth A
        0x27F22,   # CJK extension B
        0x1F600,   # grinning face
    ])
    def test_wide(self, code):
        """Wide and fullwidth characters take two cells."""
        assert classify(code) is WidthClass.WIDE
        assert char_width(chr(code)) == 2


class TestNarrowWidth:
    """Everything else takes one cell."""

    @pytest.mark.parametrize("ch", ["A", " ", "~", "\N{LATIN SMALL LETTER E WITH ACUTE}",
                                    "\N{LATIN SMALL LETTER SHARP S}", "\N{RIGHTWARDS ARROW}"])
    def test_narrow(self, ch):
        """Ordinary characters are narrow."""
        assert classify(ch) is WidthClass.NARROW

    def test_private_use_is_narrow(self):
        """Private-use code points default to one cell."""
        assert char_width(0xE000) == 1

    def test_unassigned_is_narrow(self):
        """Unassigned code points default to one cell."""
        assert char_width(0x0378) == 1

    def test_lone_surrogate_is_narrow(self):
        """An unpaired surrogate is measured as one cell."""
        assert char_width(chr(0xD800)) == 1


class TestClassifyInputs:
    """Argument handling."""

    def test_code_point_and_character_agree(self):
        """An int code point and its character classify the same."""
        assert classify(0x4E2D) is classify(chr(0x4E2D))
        assert classify(0x41) is classify("A")

    def test_classification_is_stable(self):
        """Repeated calls give the same answer."""
        assert [classify(0x4E2D) for _ in range(3)] == [WidthClass.WIDE] * 3

    def test_width_class_values_are_cell_counts(self):
        """WidthClass values equal the number of cells."""
        assert [int(w) for w in WidthClass] == [0, 1, 2]

    @pytest.mark.parametrize("value", ["", "ab"])
    def test_rejects_non_single_characters(self, value):
        """Strings must be exactly one character."""
        with pytest.raises(ValueError):
            classify(value)

    @pytest.mark.parametrize("value", [-1, 0x110000])
    def test_rejects_out_of_range_code_points(self, value):
        """Code points outside the Unicode range are rejected."""
        with pytest.raises(ValueError):
            classify(value)

    @pytest.mark.parametrize("value", [1.5, None, True])
    def test_rejects_other_types(self, value):
        """Only ints and strings are accepted."""
        with pytest.raises(TypeError):
            classify(value)
