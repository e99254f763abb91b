"""Configuration constants used across the termcells package."""

from __future__ import annotations

import os
from dataclasses import dataclass

OPEN_BRACKET: str = "["
CLOSE_BRACKET: str = "]"
CLOSE_TAG_PREFIX: str = "/"

NORMALIZED_LINE_ENDING: str = "\n"
WINDOWS_LINE_ENDING: str = "\r\n"

DEFAULT_MASK_CHAR: str = "*"
DEFAULT_PAD_CHAR: str = " "

# Upper bound on distinct code points kept by the width classification cache.
WIDTH_CACHE_SIZE: int = 4096


@dataclass(frozen=True)
class TextConfig:
    """Host text conventions, resolved once and passed to newline helpers."""

    native_line_ending: str = NORMALIZED_LINE_ENDING

    def __post_init__(self) -> None:
        if not self.native_line_ending:
            raise ValueError("native_line_ending must not be empty")

    @property
    def already_normalized(self) -> bool:
        """Return ``True`` when the native line ending is already ``\\n``."""

        return self.native_line_ending == NORMALIZED_LINE_ENDING

    @classmethod
    def from_host(cls) -> "TextConfig":
        return cls(native_line_ending=os.linesep)


DEFAULT_CONFIG: TextConfig = TextConfig.from_host()
