"""CLI entry point: a small animated render loop exercising the screen."""

from __future__ import annotations

import logging
import sys
import time

import click

from termcells.color import Color
from termcells.errors import SetupError, WriteError
from termcells.geometry import Dimensions, Position, Region
from termcells.screen import Screen
from termcells.utils import glyph_width, iter_glyphs

logger = logging.getLogger(__name__)

_PALETTE = [Color.RED, Color.YELLOW, Color.GREEN, Color.CYAN, Color.BLUE, Color.MAGENTA]


def _marker_at(inner: Region, frame: int) -> Position:
    return inner.origin + Position(
        frame % inner.dimensions.rows, frame % inner.dimensions.columns
    )


def draw_frame(screen: Screen, frame: int, message: str, repaint: bool = False) -> None:
    """Draw one frame: a border, a moving marker and a centered message.

    With *repaint* the interior is blanked first, as needed after a clear.
    """
    size = screen.size
    if size.rows < 3 or size.columns < 3:
        return

    border = _PALETTE[(frame // 10) % len(_PALETTE)]
    for cell in Region(Position(0, 0), Dimensions(1, size.columns)).cells():
        screen.put(cell, "─", border, Color.BLACK)
        screen.put(cell + Position(size.rows - 1, 0), "─", border, Color.BLACK)
    for cell in Region(Position(1, 0), Dimensions(size.rows - 2, 1)).cells():
        screen.put(cell, "│", border, Color.BLACK)
        screen.put(cell + Position(0, size.columns - 1), "│", border, Color.BLACK)

    inner = Region(Position(1, 1), Dimensions(size.rows - 2, size.columns - 2))
    if repaint:
        screen.fill(inner, " ", Color.WHITE, Color.BLACK)
    elif frame > 0:
        screen.put(_marker_at(inner, frame - 1), " ", Color.WHITE, Color.BLACK)
    screen.put(_marker_at(inner, frame), "●", Color.BRIGHT_WHITE, Color.BLACK)

    row = size.rows // 2
    width = sum(max(glyph_width(g), 1) for g in iter_glyphs(message))
    col = max((size.columns - width) // 2, 1)
    screen.put_text(Position(row, col), message, Color.BRIGHT_YELLOW, Color.BLACK)


@click.command()
@click.option("--frames", default=200, show_default=True, help="Number of frames to render")
@click.option("--fps", default=30.0, show_default=True, help="Frames per second")
@click.option("--message", default="termcells ✨ 表示", show_default=True, help="Text to center")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
)
@click.option("--log-file", default=None, help="Write logs here instead of stderr")
def main(frames, fps, message, log_level, log_file):
    """Render a short animation using differential cell updates."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=log_file,
    )

    try:
        screen = Screen.open()
    except SetupError as e:
        click.echo(f"termcells-demo: {e}", err=True)
        sys.exit(1)

    frame_time = 1.0 / fps if fps > 0 else 0.0
    try:
        with screen:
            for frame in range(frames):
                resized = screen.update_size()
                if resized:
                    screen.clear()
                draw_frame(screen, frame, message, repaint=resized)
                screen.flush()
                time.sleep(frame_time)
    except KeyboardInterrupt:
        pass
    except WriteError as e:
        logger.error("rendering stopped: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
