"""Escape, strip and measure bracket markup."""

from __future__ import annotations

from typing import Optional

from ..config import CLOSE_BRACKET, OPEN_BRACKET
from ..measure import cell_width
from .tokenizer import MarkupToken, MarkupTokenizer, MarkupTokenKind, tokenize

__all__ = [
    "MarkupToken",
    "MarkupTokenKind",
    "MarkupTokenizer",
    "tokenize",
    "escape_markup",
    "strip_markup",
    "markup_width",
]


def escape_markup(text: Optional[str]) -> str:
    """Double every bracket so ``text`` is read back literally.

    Escaping is not idempotent: escaping twice doubles the brackets again.
    """

    if text is None:
        return ""
    return text.replace(OPEN_BRACKET, OPEN_BRACKET * 2).replace(CLOSE_BRACKET, CLOSE_BRACKET * 2)


def strip_markup(text: Optional[str]) -> str:
    """Return the visible text of ``text`` with all tags removed.

    Raises :class:`~termcells.errors.MalformedMarkupError` for markup that
    cannot be tokenized.
    """

    if text is None or not text.strip():
        return ""
    return "".join(token.text for token in tokenize(text) if token.is_literal)


def markup_width(text: Optional[str]) -> int:
    """Return the cell width of the visible text of ``text``."""

    return cell_width(strip_markup(text))
