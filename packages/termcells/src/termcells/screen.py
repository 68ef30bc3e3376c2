"""The output surface.

``Screen`` ties together a :class:`~termcells.terminal.Terminal`, a
:class:`~termcells.buffer.ScreenBuffer` and the last terminal size reported by
a :class:`~termcells.size.SizeProvider`.  Callers put glyphs within its
borders; only cells whose content actually changed reach the terminal.

Lifecycle::

    uninitialized --setup()--> active --close()--> torn_down

Use it as a context manager so the terminal is restored on every exit path::

    with Screen() as screen:
        screen.update_size()
        screen.put(Position(0, 0), "A", Color.WHITE, Color.BLACK)
        screen.flush()
"""

from __future__ import annotations

import atexit
import logging
from typing import Callable, ClassVar, Literal, TextIO

from termcells.buffer import ScreenBuffer
from termcells.color import Color
from termcells.config import ScreenConfig
from termcells.errors import ScreenStateError, SetupError, WriteError
from termcells.geometry import Dimensions, Position, Region
from termcells.size import SizeProvider, default_size_provider
from termcells.terminal import ProcessTerminal, Terminal
from termcells.utils import glyph_width, iter_glyphs

logger = logging.getLogger(__name__)

ScreenState = Literal["uninitialized", "active", "torn_down"]


class Screen:
    """Diffing output surface over a single terminal.

    Only one screen may be active per process: the terminal is a process-wide
    resource.  A screen is not thread-safe.
    """

    _active: ClassVar[Screen | None] = None

    def __init__(
        self,
        terminal: Terminal | None = None,
        size_provider: SizeProvider | None = None,
        char_width: Callable[[str], int] | None = None,
        config: ScreenConfig | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._config: ScreenConfig = config or ScreenConfig.from_env()
        self._terminal: Terminal | None = terminal
        self._stream = stream
        self._size_provider: SizeProvider = size_provider or default_size_provider()
        self._char_width: Callable[[str], int] = char_width or glyph_width
        self._buffer = ScreenBuffer(self._char_width)
        self._size = Dimensions(0, 0)
        self._state: ScreenState = "uninitialized"

    @classmethod
    def open(cls, **kwargs) -> Screen:
        """Construct a screen and set it up in one step."""
        screen = cls(**kwargs)
        screen.setup()
        return screen

    # -- properties ---------------------------------------------------------

    @property
    def state(self) -> ScreenState:
        return self._state

    @property
    def size(self) -> Dimensions:
        return self._size

    @property
    def buffer(self) -> ScreenBuffer:
        return self._buffer

    # -- lifecycle ----------------------------------------------------------

    def setup(self) -> None:
        """Claim the terminal and prepare it for drawing.

        Raises :class:`SetupError` if the output stream is not a terminal,
        another screen is already active in this process, or preparing the
        terminal fails part-way (what was changed is rolled back first).
        """
        if self._state != "uninitialized":
            raise ScreenStateError(f"cannot set up a screen that is {self._state}")
        if Screen._active is not None:
            raise SetupError("another screen is already active in this process")

        if self._terminal is None:
            self._terminal = ProcessTerminal.open(self._stream, self._config)
        terminal = self._terminal

        try:
            if self._config.alternate_screen:
                terminal.enter_alternate_screen()
            if self._config.hide_cursor:
                terminal.hide_cursor()
            terminal.clear_screen()
        except WriteError as e:
            self._restore(terminal, clear=False)
            raise SetupError(f"failed preparing the terminal: {e}") from e

        self._size = Dimensions(0, 0)
        self._buffer = ScreenBuffer(self._char_width)
        self._state = "active"
        Screen._active = self
        atexit.register(self.close)
        logger.debug("screen set up (config=%s)", self._config)

    def close(self) -> None:
        """Restore the terminal: clear it, show the cursor, leave the alternate screen.

        Runs once per screen; later calls do nothing.  Write failures are
        logged and otherwise ignored, since restoration is best-effort.
        """
        if self._state != "active":
            return
        self._state = "torn_down"
        if Screen._active is self:
            Screen._active = None
        atexit.unregister(self.close)

        if self._terminal is not None:
            self._restore(self._terminal, clear=True)
        logger.debug("screen torn down")

    def _restore(self, terminal: Terminal, clear: bool) -> None:
        """Best-effort terminal restoration; each step runs even if an earlier one fails."""
        steps: list[Callable[[], None]] = [terminal.clear_screen] if clear else []
        steps.append(terminal.show_cursor)
        if self._config.alternate_screen:
            steps.append(terminal.leave_alternate_screen)
        steps.append(terminal.flush)
        for step in steps:
            try:
                step()
            except WriteError as e:
                logger.warning("terminal restore step %s failed: %s", step.__name__, e)

    def __enter__(self) -> Screen:
        if self._state == "uninitialized":
            self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -- size ---------------------------------------------------------------

    def update_size(self) -> bool:
        """Poll the size provider; resize the cache if the terminal changed.

        Returns ``True`` when the size changed.  An unavailable size counts
        as unchanged.
        """
        self._require_active()
        new_size = self._size_provider.size()
        if new_size is None or new_size == self._size:
            return False
        self._buffer.resize(new_size)
        logger.debug("screen resized %s -> %s", self._size, new_size)
        self._size = new_size
        return True

    # -- drawing ------------------------------------------------------------

    def put(self, position: Position, glyph: str, fg: Color, bg: Color) -> None:
        """Draw *glyph* at *position* if it differs from what is there.

        Positions outside the current size are ignored.
        """
        terminal = self._require_active()
        if position.within(self._size) is None:
            return
        if self._buffer.update(position, glyph, fg, bg):
            try:
                terminal.move_cursor(position.row, position.column)
                terminal.set_fg(fg)
                terminal.set_bg(bg)
                terminal.put(glyph)
            except WriteError:
                # the glyph may not have reached the terminal; redraw on retry
                self._buffer.invalidate(position)
                raise

    def put_text(self, position: Position, text: str, fg: Color, bg: Color) -> int:
        """Draw *text* glyph by glyph starting at *position*.

        Stops at the right edge.  Returns the number of columns advanced.
        """
        self._require_active()
        advance = 0
        for g in iter_glyphs(text):
            cell = position + Position(0, advance)
            if cell.within(self._size) is None:
                break
            self.put(cell, g, fg, bg)
            advance += max(self._char_width(g), 1)
        return advance

    def fill(self, region: Region, glyph: str, fg: Color, bg: Color) -> None:
        """Put *glyph* in every cell of *region*."""
        self._require_active()
        for cell in region.cells():
            self.put(cell, glyph, fg, bg)

    def set_cursor_position(self, position: Position) -> None:
        terminal = self._require_active()
        if position.within(self._size) is not None:
            terminal.move_cursor(position.row, position.column)

    def clear(self) -> None:
        """Clear the terminal and forget everything drawn so far."""
        terminal = self._require_active()
        terminal.clear_screen()
        self._buffer.clear()

    def flush(self) -> None:
        self._require_active().flush()

    # -- helpers ------------------------------------------------------------

    def _require_active(self) -> Terminal:
        if self._state != "active" or self._terminal is None:
            raise ScreenStateError(f"screen is {self._state}, not active")
        return self._terminal
