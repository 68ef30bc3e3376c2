"""termcells: cell-addressed terminal output with differential rendering."""

# Previous-frame cache
from termcells.buffer import ScreenBuffer

# Colors
from termcells.color import Color

# Configuration
from termcells.config import ScreenConfig

# Errors
from termcells.errors import ScreenStateError, SetupError, TermcellsError, WriteError

# Geometry
from termcells.geometry import CellIterator, Dimensions, Position, Region

# Output surface
from termcells.screen import Screen

# Terminal size providers
from termcells.size import (
    PortableSizeProvider,
    PosixSizeProvider,
    SizeProvider,
    StaticSizeProvider,
    default_size_provider,
)

# Terminal interface and implementation
from termcells.terminal import ProcessTerminal, Terminal

# Glyph utilities
from termcells.utils import glyph_width, iter_glyphs

__all__ = [
    # buffer
    "ScreenBuffer",
    # color
    "Color",
    # config
    "ScreenConfig",
    # errors
    "ScreenStateError",
    "SetupError",
    "TermcellsError",
    "WriteError",
    # geometry
    "CellIterator",
    "Dimensions",
    "Position",
    "Region",
    # screen
    "Screen",
    # size
    "PortableSizeProvider",
    "PosixSizeProvider",
    "SizeProvider",
    "StaticSizeProvider",
    "default_size_provider",
    # terminal
    "ProcessTerminal",
    "Terminal",
    # utils
    "glyph_width",
    "iter_glyphs",
]
