"""Terminal size providers.

A size provider answers "how big is the terminal right now?" on demand.
``None`` means the size could not be determined; screens treat that as
"unchanged" rather than as an error.
"""

from __future__ import annotations

import logging
import os
import struct
import sys
from typing import Protocol

from termcells.geometry import Dimensions

HAS_IOCTL = sys.platform != "win32"

if HAS_IOCTL:
    import fcntl
    import termios

logger = logging.getLogger(__name__)

STDOUT_FILENO = 1

# struct winsize: rows, columns, x pixels, y pixels
_WINSIZE = struct.Struct("HHHH")


class SizeProvider(Protocol):
    """Reports the current terminal extent, or ``None`` if unavailable."""

    def size(self) -> Dimensions | None: ...


class PosixSizeProvider:
    """Queries the terminal with the ``TIOCGWINSZ`` ioctl."""

    def __init__(self, fd: int = STDOUT_FILENO) -> None:
        if not HAS_IOCTL:
            raise RuntimeError("PosixSizeProvider requires fcntl and termios")
        self._fd = fd

    def size(self) -> Dimensions | None:
        try:
            raw = fcntl.ioctl(self._fd, termios.TIOCGWINSZ, bytes(_WINSIZE.size))
        except OSError as e:
            logger.debug("TIOCGWINSZ on fd %d failed: %s", self._fd, e)
            return None
        rows, columns, _, _ = _WINSIZE.unpack(raw)
        return Dimensions(rows, columns)


class PortableSizeProvider:
    """Queries the terminal through :func:`os.get_terminal_size`."""

    def __init__(self, fd: int = STDOUT_FILENO) -> None:
        self._fd = fd

    def size(self) -> Dimensions | None:
        try:
            ts = os.get_terminal_size(self._fd)
        except (ValueError, OSError) as e:
            logger.debug("get_terminal_size on fd %d failed: %s", self._fd, e)
            return None
        return Dimensions(ts.lines, ts.columns)


class StaticSizeProvider:
    """Reports a fixed, settable size.  Useful for headless rendering and tests."""

    def __init__(self, dimensions: Dimensions | None = None) -> None:
        self.dimensions = dimensions

    def size(self) -> Dimensions | None:
        return self.dimensions


def default_size_provider(fd: int = STDOUT_FILENO) -> SizeProvider:
    """Return the best provider for the current platform."""
    if HAS_IOCTL:
        return PosixSizeProvider(fd)
    return PortableSizeProvider(fd)
