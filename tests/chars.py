"""
Shared characters for the termcells test suite.

Invisible and astral characters are built from code points so the test
sources stay plain ASCII.
"""

WIDE = chr(0x4E2D)            # CJK ideograph, two cells
WIDE_2 = chr(0x6587)          # another CJK ideograph, two cells
ASTRAL_WIDE = chr(0x27F22)    # CJK extension B, stored as one code point
GRIN = chr(0x1F600)           # emoji, stored as one code point
GRIN_PAIR = chr(0xD83D) + chr(0xDE00)  # the same emoji as a UTF-16 surrogate pair
COMBINING_ACUTE = chr(0x0301)
ZWSP = chr(0x200B)
FULLWIDTH_A = chr(0xFF21)
