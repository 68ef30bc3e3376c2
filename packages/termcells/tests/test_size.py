"""Tests for termcells.size -- terminal size providers."""

from __future__ import annotations

import os
import struct

import pytest

from termcells import size as size_mod
from termcells.geometry import Dimensions
from termcells.size import (
    PortableSizeProvider,
    PosixSizeProvider,
    StaticSizeProvider,
    default_size_provider,
)

posix_only = pytest.mark.skipif(not size_mod.HAS_IOCTL, reason="requires fcntl/termios")


@posix_only
class TestPosixSizeProvider:
    def test_reports_rows_and_columns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple] = []

        def fake_ioctl(fd, request, arg):
            calls.append((fd, request))
            return struct.pack("HHHH", 24, 80, 640, 480)

        monkeypatch.setattr(size_mod.fcntl, "ioctl", fake_ioctl)
        assert PosixSizeProvider().size() == Dimensions(24, 80)
        assert calls == [(1, size_mod.termios.TIOCGWINSZ)]

    def test_failure_yields_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def failing_ioctl(fd, request, arg):
            raise OSError(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(size_mod.fcntl, "ioctl", failing_ioctl)
        assert PosixSizeProvider().size() is None

    def test_queries_given_descriptor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[int] = []

        def fake_ioctl(fd, request, arg):
            seen.append(fd)
            return struct.pack("HHHH", 10, 20, 0, 0)

        monkeypatch.setattr(size_mod.fcntl, "ioctl", fake_ioctl)
        PosixSizeProvider(fd=7).size()
        assert seen == [7]


class TestPortableSizeProvider:
    def test_reports_rows_and_columns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            os, "get_terminal_size", lambda fd: os.terminal_size((132, 43))
        )
        assert PortableSizeProvider().size() == Dimensions(43, 132)

    def test_failure_yields_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def failing(fd):
            raise OSError(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(os, "get_terminal_size", failing)
        assert PortableSizeProvider().size() is None


class TestStaticSizeProvider:
    def test_reports_configured_size(self) -> None:
        provider = StaticSizeProvider(Dimensions(5, 6))
        assert provider.size() == Dimensions(5, 6)

    def test_size_can_change(self) -> None:
        provider = StaticSizeProvider(Dimensions(5, 6))
        provider.dimensions = Dimensions(7, 8)
        assert provider.size() == Dimensions(7, 8)

    def test_defaults_to_unavailable(self) -> None:
        assert StaticSizeProvider().size() is None


class TestDefaultSizeProvider:
    def test_platform_choice(self) -> None:
        provider = default_size_provider()
        expected = PosixSizeProvider if size_mod.HAS_IOCTL else PortableSizeProvider
        assert isinstance(provider, expected)
