"""Measure how many terminal cells a piece of text occupies."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from .scanner import ScalarUnit, scan
from .width import char_width

__all__ = ["cell_width", "unit_widths"]


def unit_widths(units: Iterable[ScalarUnit]) -> Iterator[Tuple[ScalarUnit, int]]:
    """Pair every scalar unit with its cell width."""

    for unit in units:
        yield unit, char_width(unit.code)


def cell_width(text: Optional[str]) -> int:
    """Return the number of cells ``text`` occupies; ``0`` for empty input."""

    return sum(width for _, width in unit_widths(scan(text)))
