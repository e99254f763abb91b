"""Measure, truncate and strip markup from text laid out on a terminal grid."""

import logging

from .config import DEFAULT_CONFIG, TextConfig
from .errors import MalformedMarkupError, TermcellsError
from .markup import (
    MarkupToken,
    MarkupTokenKind,
    MarkupTokenizer,
    escape_markup,
    markup_width,
    strip_markup,
    tokenize,
)
from .measure import cell_width
from .scanner import ScalarUnit, scan, scan_reversed
from .text import mask, normalize_newlines, remove_new_lines, split_lines
from .truncate import fit_to_width, pad_to_width, truncate, truncate_start
from .width import WidthClass, char_width, classify

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "TextConfig",
    "MalformedMarkupError",
    "TermcellsError",
    "MarkupToken",
    "MarkupTokenKind",
    "MarkupTokenizer",
    "escape_markup",
    "markup_width",
    "strip_markup",
    "tokenize",
    "cell_width",
    "ScalarUnit",
    "scan",
    "scan_reversed",
    "mask",
    "normalize_newlines",
    "remove_new_lines",
    "split_lines",
    "fit_to_width",
    "pad_to_width",
    "truncate",
    "truncate_start",
    "WidthClass",
    "char_width",
    "classify",
]
