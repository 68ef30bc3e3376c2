"""Exceptions raised by termcells."""

from __future__ import annotations


class TermcellsError(Exception):
    """Base class for all termcells errors."""


class SetupError(TermcellsError):
    """The output stream could not be claimed as an interactive terminal."""


class WriteError(TermcellsError):
    """Writing to (or flushing) the terminal failed.

    The underlying ``OSError`` is chained as ``__cause__``.  Callers can catch
    this, tear the screen down and exit cleanly.
    """


class ScreenStateError(TermcellsError):
    """A screen operation was invoked outside the active state."""
