"""Glyph measurement and segmentation.

A *glyph* is one grapheme cluster: usually a single code point, sometimes a
base character followed by combining marks, variation selectors or a ZWJ
emoji sequence.  Widths come from ``wcwidth``; clusters from ``grapheme``.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Glyph width
# ---------------------------------------------------------------------------


def _measure(g: str) -> int:
    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tone modifiers and regional indicators all force
        # emoji presentation.
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2
    if unicodedata.category(first) in ("Mn", "Me", "Cf"):
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def glyph_width(g: str) -> int:
    """Return the number of terminal columns *g* occupies.

    Control characters, lone combining marks and empty strings measure 0.
    Callers that must reserve at least one column floor the result at 1.
    """
    if not g:
        return 0
    cached = _width_cache.get(g)
    if cached is not None:
        return cached
    return _cache_width(g, _measure(g))


def iter_glyphs(text: str) -> Iterator[str]:
    """Yield the grapheme clusters of *text* in order."""
    return grapheme.graphemes(text)
