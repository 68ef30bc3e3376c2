"""The sixteen standard terminal colors and their SGR parameters."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """A foreground or background color from the 16-color ANSI palette.

    Values are palette indices: 0-7 are the normal colors, 8-15 the bright
    variants.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    @property
    def is_bright(self) -> bool:
        return self.value >= 8

    @property
    def fg_code(self) -> int:
        """SGR parameter selecting this color as the foreground."""
        if self.is_bright:
            return 90 + self.value - 8
        return 30 + self.value

    @property
    def bg_code(self) -> int:
        """SGR parameter selecting this color as the background."""
        if self.is_bright:
            return 100 + self.value - 8
        return 40 + self.value
