"""Exception types raised by termcells."""

from __future__ import annotations


class TermcellsError(Exception):
    """Base class for errors raised while processing text."""


class MalformedMarkupError(TermcellsError, ValueError):
    """Raised when bracket markup cannot be tokenized.

    ``position`` is the storage-unit offset in ``text`` where the problem was
    detected. For an unterminated tag this is ``len(text)``.
    """

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(f"{message} (position {position})")
        self.text = text
        self.position = position
