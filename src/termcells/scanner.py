"""Decode text into Unicode scalar values with their source offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

__all__ = ["ScalarUnit", "scan", "scan_reversed"]

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


@dataclass(frozen=True)
class ScalarUnit:
    """One scalar value and the half-open ``[start, end)`` span it covers.

    A UTF-16 surrogate pair left intact in a ``str`` spans two storage units
    but is a single scalar; every other unit spans one.
    """

    code: int
    start: int
    end: int

    @property
    def char(self) -> str:
        return chr(self.code)

    @property
    def size(self) -> int:
        return self.end - self.start


def _combine_surrogates(high: int, low: int) -> int:
    return 0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)


def scan(text: Optional[str]) -> Iterator[ScalarUnit]:
    """Yield the scalar units of ``text`` in order.

    The sequence is lazy and finite; calling :func:`scan` again restarts it.
    """

    if not text:
        return
    length = len(text)
    idx = 0
    while idx < length:
        code = ord(text[idx])
        if code in _HIGH_SURROGATES and idx + 1 < length:
            low = ord(text[idx + 1])
            if low in _LOW_SURROGATES:
                yield ScalarUnit(_combine_surrogates(code, low), idx, idx + 2)
                idx += 2
                continue
        yield ScalarUnit(code, idx, idx + 1)
        idx += 1


def scan_reversed(text: Optional[str]) -> Iterator[ScalarUnit]:
    """Yield the scalar units of ``text`` from last to first."""

    units: List[ScalarUnit] = list(scan(text))
    return reversed(units)
