"""Display width classification for individual Unicode scalar values."""

from __future__ import annotations

import unicodedata
from bisect import bisect_right
from enum import IntEnum
from functools import lru_cache
from typing import Tuple, Union

from .config import WIDTH_CACHE_SIZE

__all__ = ["WidthClass", "classify", "char_width"]

Scalar = Union[int, str]

_MAX_CODE_POINT = 0x10FFFF

# General categories that never advance the cursor.
_ZERO_WIDTH_CATEGORIES = frozenset({"Cc", "Cf", "Mn", "Me", "Zl", "Zp"})

_WIDE_EAST_ASIAN = frozenset({"W", "F"})

# Default_Ignorable_Code_Point ranges plus conjoining Hangul jamo, which render
# as part of the preceding syllable. Sorted, inclusive, non-overlapping.
_ZERO_WIDTH_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x00AD, 0x00AD),
    (0x034F, 0x034F),
    (0x061C, 0x061C),
    (0x115F, 0x11FF),
    (0x17B4, 0x17B5),
    (0x180B, 0x180F),
    (0x200B, 0x200F),
    (0x202A, 0x202E),
    (0x2060, 0x206F),
    (0x3164, 0x3164),
    (0xD7B0, 0xD7FF),
    (0xFE00, 0xFE0F),
    (0xFEFF, 0xFEFF),
    (0xFFA0, 0xFFA0),
    (0xFFF0, 0xFFF8),
    (0x1BCA0, 0x1BCA3),
    (0x1D173, 0x1D17A),
    (0xE0000, 0xE0FFF),
)
_ZERO_WIDTH_STARTS: Tuple[int, ...] = tuple(start for start, _ in _ZERO_WIDTH_RANGES)


class WidthClass(IntEnum):
    """Number of terminal cells a scalar value occupies."""

    ZERO = 0
    NARROW = 1
    WIDE = 2


def _in_zero_width_ranges(code: int) -> bool:
    idx = bisect_right(_ZERO_WIDTH_STARTS, code) - 1
    if idx < 0:
        return False
    return code <= _ZERO_WIDTH_RANGES[idx][1]


def _to_code_point(scalar: Scalar) -> int:
    if isinstance(scalar, str):
        if len(scalar) != 1:
            raise ValueError(f"expected a single character, got {scalar!r}")
        return ord(scalar)
    if isinstance(scalar, bool) or not isinstance(scalar, int):
        raise TypeError(f"expected a code point or character, got {type(scalar).__name__}")
    if not 0 <= scalar <= _MAX_CODE_POINT:
        raise ValueError(f"code point {scalar:#x} is outside the Unicode range")
    return scalar


@lru_cache(maxsize=WIDTH_CACHE_SIZE)
def _classify_code(code: int) -> WidthClass:
    if _in_zero_width_ranges(code):
        return WidthClass.ZERO
    ch = chr(code)
    category = unicodedata.category(ch)
    if category in _ZERO_WIDTH_CATEGORIES:
        return WidthClass.ZERO
    if category == "Cn":
        return WidthClass.NARROW
    if unicodedata.east_asian_width(ch) in _WIDE_EAST_ASIAN:
        return WidthClass.WIDE
    return WidthClass.NARROW


def classify(scalar: Scalar) -> WidthClass:
    """Return the :class:`WidthClass` of ``scalar``.

    ``scalar`` may be an integer code point or a one-character string. The
    result depends only on the value itself, never on neighbouring text:

    * control, format and combining characters, and default-ignorable code
      points occupy no cells;
    * East-Asian Wide and Fullwidth characters occupy two cells;
    * everything else, unassigned and private-use code points included,
      occupies one cell.
    """

    return _classify_code(_to_code_point(scalar))


def char_width(scalar: Scalar) -> int:
    """Return the cell width (0, 1 or 2) of ``scalar``."""

    return int(classify(scalar))
