"""Raw escape-sequence emitter.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal`` that writes
ANSI/VT100 control sequences for cursor movement, color selection, screen
clearing, alternate-screen and cursor-visibility toggling to a text stream
(standard output by default).
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

from termcells.color import Color
from termcells.config import ScreenConfig
from termcells.errors import SetupError, WriteError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CLEAR_SCREEN = "\x1b[2J"
_ENTER_ALTSCREEN = "\x1b7\x1b[?47h"
_LEAVE_ALTSCREEN = "\x1b[?47l\x1b8"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_MOVE_CURSOR_FMT = "\x1b[{};{}H"
_SGR_FMT = "\x1b[{}m"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the output operations a screen needs."""

    def clear_screen(self) -> None: ...

    def enter_alternate_screen(self) -> None: ...

    def leave_alternate_screen(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def move_cursor(self, row: int, column: int) -> None: ...

    def set_fg(self, color: Color) -> None: ...

    def set_bg(self, color: Color) -> None: ...

    def put(self, glyph: str) -> None: ...

    def flush(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by a text stream, normally ``sys.stdout``.

    Every operation is a direct, synchronous write.  Output is buffered by
    the stream until :meth:`flush` is called.  ``OSError`` from the stream is
    re-raised as :class:`~termcells.errors.WriteError`.
    """

    def __init__(self, stream: TextIO, config: ScreenConfig | None = None) -> None:
        self._stream = stream
        self._write_log_path: str = (config or ScreenConfig()).write_log_path

    @classmethod
    def open(
        cls,
        stream: TextIO | None = None,
        config: ScreenConfig | None = None,
    ) -> ProcessTerminal:
        """Claim *stream* (default ``sys.stdout``) as an interactive terminal.

        Raises :class:`SetupError` if the stream is not a TTY.
        """
        stream = stream if stream is not None else sys.stdout
        try:
            is_tty = stream.isatty()
        except (AttributeError, ValueError, OSError) as e:
            raise SetupError("Failed creating a terminal for the output stream.") from e
        if not is_tty:
            raise SetupError("Failed creating a terminal for the output stream: not a TTY.")
        logger.debug("claimed terminal stream %r", stream)
        return cls(stream, config)

    # -- screen / cursor ----------------------------------------------------

    def clear_screen(self) -> None:
        self.write(_CLEAR_SCREEN)

    def enter_alternate_screen(self) -> None:
        self.write(_ENTER_ALTSCREEN)

    def leave_alternate_screen(self) -> None:
        self.write(_LEAVE_ALTSCREEN)

    def hide_cursor(self) -> None:
        self.write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(_SHOW_CURSOR)

    def move_cursor(self, row: int, column: int) -> None:
        """Move to the zero-indexed (*row*, *column*)."""
        # terminal rows/columns are one-indexed
        self.write(_MOVE_CURSOR_FMT.format(row + 1, column + 1))

    # -- colors / output ----------------------------------------------------

    def set_fg(self, color: Color) -> None:
        self.write(_SGR_FMT.format(color.fg_code))

    def set_bg(self, color: Color) -> None:
        self.write(_SGR_FMT.format(color.bg_code))

    def put(self, glyph: str) -> None:
        self.write(glyph)

    def write(self, data: str) -> None:
        """Write *data* to the stream and optionally to the write log."""
        try:
            self._stream.write(data)
        except OSError as e:
            raise WriteError(f"terminal write failed: {e}") from e

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                pass

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise WriteError(f"terminal flush failed: {e}") from e
