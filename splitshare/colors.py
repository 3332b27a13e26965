"""ANSI terminal colour codes used to decorate console output."""

from enum import Enum


class Code(Enum):
    """An ANSI select-graphic-rendition code."""

    FG_RED = 31
    FG_GREEN = 32
    FG_BLUE = 34
    FG_DEFAULT = 39
    FG_BLACK = 30
    BG_RED = 41
    BG_GREEN = 42
    BG_BLUE = 44
    BG_DEFAULT = 49
    BLINK = 5
    RST_BLINK = 25

    def __str__(self) -> str:
        return f"\033[{self.value}m"