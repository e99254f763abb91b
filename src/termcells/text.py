"""Line-ending and masking helpers that share the scalar-unit model."""

from __future__ import annotations

from typing import List, Optional

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_MASK_CHAR,
    NORMALIZED_LINE_ENDING,
    WINDOWS_LINE_ENDING,
    TextConfig,
)
from .scanner import scan

__all__ = ["normalize_newlines", "remove_new_lines", "split_lines", "mask"]


def normalize_newlines(
    text: Optional[str], native: bool = False, config: TextConfig = DEFAULT_CONFIG
) -> str:
    """Convert ``\\r\\n`` to ``\\n``.

    With ``native=True`` the result uses ``config.native_line_ending``
    instead, which is a no-op when that ending is already ``\\n``.
    """

    text = (text or "").replace(WINDOWS_LINE_ENDING, NORMALIZED_LINE_ENDING)
    if native and not config.already_normalized:
        text = text.replace(NORMALIZED_LINE_ENDING, config.native_line_ending)
    return text


def remove_new_lines(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return text.replace(WINDOWS_LINE_ENDING, "").replace(NORMALIZED_LINE_ENDING, "")


def split_lines(text: Optional[str]) -> List[str]:
    if text is None:
        return []
    return normalize_newlines(text).split(NORMALIZED_LINE_ENDING)


def mask(text: Optional[str], mask_char: Optional[str] = DEFAULT_MASK_CHAR) -> str:
    """Replace every scalar unit of ``text`` with ``mask_char``.

    A surrogate pair counts once, matching how widths are measured.
    ``mask_char`` must itself be a single scalar unit.
    """

    if mask_char is None:
        return ""
    if sum(1 for _ in scan(mask_char)) != 1:
        raise ValueError(f"mask character must be a single character, got {mask_char!r}")
    if not text:
        return ""
    count = sum(1 for _ in scan(text))
    return mask_char * count
