"""Lexer for bracket-delimited style markup such as ``[bold]hi[/]``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..config import CLOSE_BRACKET, CLOSE_TAG_PREFIX, OPEN_BRACKET
from ..errors import MalformedMarkupError
from ..scanner import ScalarUnit, scan

__all__ = ["MarkupTokenKind", "MarkupToken", "MarkupTokenizer", "tokenize"]

logger = logging.getLogger(__name__)

_BRACKETS = (OPEN_BRACKET, CLOSE_BRACKET)


class MarkupTokenKind(Enum):
    LITERAL = "literal"
    OPEN_TAG = "open"
    CLOSE_TAG = "close"


@dataclass(frozen=True)
class MarkupToken:
    """A lexed piece of markup.

    ``text`` holds the visible content for literals (with doubled brackets
    already collapsed) or the tag body for tags. ``start`` and ``end`` locate
    the token's raw source, so the spans of all tokens tile the input.
    """

    kind: MarkupTokenKind
    text: str
    start: int
    end: int

    @property
    def source_range(self) -> Tuple[int, int]:
        return (self.start, self.end)

    @property
    def is_literal(self) -> bool:
        return self.kind is MarkupTokenKind.LITERAL


class _State(Enum):
    SCANNING = "scanning"
    IN_TAG = "in_tag"
    ESCAPED = "escaped"


class MarkupTokenizer:
    """Iterable over the :class:`MarkupToken` objects of ``text``.

    Each call to :meth:`__iter__` lexes from the beginning again. Tokens are
    produced lazily, so a :class:`MalformedMarkupError` surfaces only when
    iteration reaches the offending position.
    """

    def __init__(self, text: Optional[str]) -> None:
        self.text = text or ""

    def __iter__(self) -> Iterator[MarkupToken]:
        return self._lex()

    def _fail(self, message: str, position: int) -> MalformedMarkupError:
        logger.debug("malformed markup at %d: %s", position, message)
        return MalformedMarkupError(message, self.text, position)

    def _lex(self) -> Iterator[MarkupToken]:
        text = self.text
        state = _State.SCANNING
        literal: List[str] = []
        literal_start = 0
        tag: List[str] = []
        tag_start = 0
        pending: Optional[ScalarUnit] = None

        for unit in scan(text):
            ch = unit.char
            source = text[unit.start:unit.end]

            if state is _State.SCANNING:
                if ch in _BRACKETS:
                    pending = unit
                    state = _State.ESCAPED
                    continue
                if not literal:
                    literal_start = unit.start
                literal.append(source)
                continue

            if state is _State.ESCAPED:
                assert pending is not None
                if literal:
                    yield MarkupToken(MarkupTokenKind.LITERAL, "".join(literal), literal_start, pending.start)
                    literal = []
                if ch == pending.char:
                    yield MarkupToken(MarkupTokenKind.LITERAL, ch, pending.start, unit.end)
                    state = _State.SCANNING
                    continue
                if pending.char == CLOSE_BRACKET:
                    raise self._fail("unescaped ']' outside of a tag", pending.start)
                tag = []
                tag_start = pending.start
                state = _State.IN_TAG

            # IN_TAG; the unit after an opening bracket also lands here.
            if ch == CLOSE_BRACKET:
                body = "".join(tag)
                if not body:
                    raise self._fail("empty markup tag", tag_start)
                kind = MarkupTokenKind.CLOSE_TAG if body.startswith(CLOSE_TAG_PREFIX) else MarkupTokenKind.OPEN_TAG
                yield MarkupToken(kind, body, tag_start, unit.end)
                state = _State.SCANNING
            elif ch == OPEN_BRACKET:
                raise self._fail("unexpected '[' inside a tag", unit.start)
            else:
                tag.append(source)

        if state is _State.ESCAPED:
            assert pending is not None
            if literal:
                yield MarkupToken(MarkupTokenKind.LITERAL, "".join(literal), literal_start, pending.start)
            if pending.char == CLOSE_BRACKET:
                raise self._fail("unescaped ']' outside of a tag", pending.start)
            raise self._fail("unterminated markup tag", len(text))
        if state is _State.IN_TAG:
            raise self._fail("unterminated markup tag", len(text))
        if literal:
            yield MarkupToken(MarkupTokenKind.LITERAL, "".join(literal), literal_start, len(text))


def tokenize(text: Optional[str]) -> Iterator[MarkupToken]:
    """Lex ``text`` into markup tokens."""

    return iter(MarkupTokenizer(text))
