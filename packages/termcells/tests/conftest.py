import pytest

from termcells.config import ScreenConfig
from termcells.geometry import Dimensions
from termcells.screen import Screen
from termcells.size import StaticSizeProvider

from .virtual_terminal import VirtualTerminal


@pytest.fixture(autouse=True)
def _release_active_screen():
    """Make sure no test leaks an active screen into the next one."""
    yield
    if Screen._active is not None:
        Screen._active.close()
    Screen._active = None


@pytest.fixture
def terminal():
    return VirtualTerminal()


@pytest.fixture
def sizes():
    return StaticSizeProvider(Dimensions(24, 80))


@pytest.fixture
def screen(terminal, sizes):
    """An active screen on a virtual 24x80 terminal, with setup output discarded."""
    s = Screen(terminal=terminal, size_provider=sizes, config=ScreenConfig())
    s.setup()
    s.update_size()
    terminal.clear_buffer()
    yield s
    s.close()
