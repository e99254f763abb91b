"""Cut and pad text to a budget of terminal cells."""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_PAD_CHAR
from .measure import cell_width, unit_widths
from .scanner import scan, scan_reversed

__all__ = ["truncate", "truncate_start", "pad_to_width", "fit_to_width"]

logger = logging.getLogger(__name__)


def truncate(text: Optional[str], max_cells: int) -> Optional[str]:
    """Return the longest prefix of ``text`` that fits in ``max_cells``.

    Empty input and negative budgets are returned unchanged. Otherwise scalar
    units are dropped from the end until the rest fits, so a wide character
    that straddles the budget is removed entirely and the result may be
    narrower than ``max_cells``. The cut never falls inside a scalar unit.
    """

    if not text or max_cells < 0:
        return text

    remaining = cell_width(text)
    if remaining <= max_cells:
        return text

    cut = len(text)
    for unit, width in unit_widths(scan_reversed(text)):
        if remaining <= max_cells:
            break
        remaining -= width
        cut = unit.start

    logger.debug("truncated %d storage units to %d for %d cells", len(text), cut, max_cells)
    return text[:cut]


def truncate_start(text: Optional[str], max_cells: int) -> Optional[str]:
    """Return the longest suffix of ``text`` that fits in ``max_cells``.

    Mirror image of :func:`truncate`: leading scalar units are dropped.
    """

    if not text or max_cells < 0:
        return text

    remaining = cell_width(text)
    if remaining <= max_cells:
        return text

    cut = 0
    for unit, width in unit_widths(scan(text)):
        if remaining <= max_cells:
            break
        remaining -= width
        cut = unit.end

    logger.debug("dropped %d leading storage units for %d cells", cut, max_cells)
    return text[cut:]


def pad_to_width(text: Optional[str], width: int, pad_char: str = DEFAULT_PAD_CHAR) -> str:
    """Right-pad ``text`` with ``pad_char`` until it measures ``width`` cells.

    Text that already reaches ``width`` is returned unchanged. ``pad_char``
    must occupy exactly one cell.
    """

    if cell_width(pad_char) != 1 or len(list(scan(pad_char))) != 1:
        raise ValueError(f"pad character must be a single one-cell character, got {pad_char!r}")
    text = text or ""
    current = cell_width(text)
    if current >= width:
        return text
    return text + pad_char * (width - current)


def fit_to_width(text: Optional[str], width: int, pad_char: str = DEFAULT_PAD_CHAR) -> str:
    """Truncate then pad ``text`` so it fills exactly ``width`` cells."""

    if width < 0:
        raise ValueError("width must not be negative")
    return pad_to_width(truncate(text, width), width, pad_char)
