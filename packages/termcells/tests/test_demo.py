"""Tests for the termcells-demo render loop and CLI."""

from __future__ import annotations

from click.testing import CliRunner

from termcells.config import ScreenConfig
from termcells.demo import draw_frame, main
from termcells.geometry import Dimensions, Position
from termcells.screen import Screen
from termcells.size import StaticSizeProvider

from .virtual_terminal import VirtualTerminal


class TestDrawFrame:
    def test_first_frame_draws_border_and_message(self, screen: Screen) -> None:
        draw_frame(screen, 0, "hi", repaint=True)
        assert screen.buffer.get(Position(0, 0))[0] == "─"
        assert screen.buffer.get(Position(5, 0))[0] == "│"
        assert screen.buffer.get(Position(12, 39))[0] == "h"
        assert screen.buffer.get(Position(12, 40))[0] == "i"

    def test_next_frame_only_moves_the_marker(
        self, screen: Screen, terminal: VirtualTerminal
    ) -> None:
        draw_frame(screen, 0, "hi", repaint=True)
        terminal.clear_buffer()
        draw_frame(screen, 1, "hi")
        puts = [op[1] for op in terminal.ops if op[0] == "put"]
        assert puts == [" ", "●"]

    def test_tiny_screen_draws_nothing(
        self, terminal: VirtualTerminal, sizes: StaticSizeProvider
    ) -> None:
        sizes.dimensions = Dimensions(2, 2)
        with Screen(terminal=terminal, size_provider=sizes, config=ScreenConfig()) as s:
            s.update_size()
            terminal.clear_buffer()
            draw_frame(s, 0, "hi", repaint=True)
            assert terminal.ops == []


class TestCli:
    def test_refuses_non_terminal_output(self) -> None:
        result = CliRunner().invoke(main, ["--frames", "1"])
        assert result.exit_code == 1
