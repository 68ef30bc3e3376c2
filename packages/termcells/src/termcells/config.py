"""Screen configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class ScreenConfig:
    """Knobs controlling how a screen claims and restores the terminal.

    ``write_log_path`` mirrors every byte sent to the terminal into a file,
    which is handy when debugging escape output.
    """

    alternate_screen: bool = True
    hide_cursor: bool = True
    write_log_path: str = ""

    @classmethod
    def from_env(cls) -> ScreenConfig:
        return cls(
            alternate_screen=os.environ.get("TERMCELLS_NO_ALTSCREEN") != "1",
            hide_cursor=os.environ.get("TERMCELLS_SHOW_CURSOR") != "1",
            write_log_path=os.environ.get("TERMCELLS_WRITE_LOG", ""),
        )
