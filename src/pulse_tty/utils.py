"""
Terminal text utilities.

Provides:
- visible_width(): terminal column width of a string, ignoring ANSI codes
- truncate_to_width(): ANSI-aware truncation so a frame line never wraps
"""
from __future__ import annotations

import re
import unicodedata
from typing import NamedTuple

from wcwidth import wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def _char_width(ch: str) -> int:
    if unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    w = wcwidth(ch)
    return w if w > 0 else 0


def visible_width(text: str) -> int:
    """Calculate the visible terminal column width of a string."""
    if not text:
        return 0

    # Fast path: pure ASCII printable
    if all(0x20 <= ord(c) <= 0x7E for c in text):
        return len(text)

    clean = strip_ansi(text) if "\x1b" in text else text
    return sum(_char_width(c) for c in clean)


class _AnsiExtract(NamedTuple):
    code: str
    length: int


def _extract_ansi_code(text: str, pos: int) -> _AnsiExtract | None:
    m = _ANSI_RE.match(text, pos)
    if m is None:
        return None
    return _AnsiExtract(m.group(0), m.end() - pos)


def truncate_to_width(text: str, max_width: int, ellipsis: str = "…") -> str:
    """
    Truncate text to max_width columns, adding ellipsis if needed.
    ANSI codes are preserved but don't count toward width.
    """
    if visible_width(text) <= max_width:
        return text

    target_width = max_width - visible_width(ellipsis)
    if target_width <= 0:
        return ellipsis[:max(0, max_width)]

    result = ""
    current_width = 0
    i = 0
    while i < len(text):
        ansi = _extract_ansi_code(text, i)
        if ansi:
            result += ansi.code
            i += ansi.length
            continue
        cw = _char_width(text[i])
        if current_width + cw > target_width:
            break
        result += text[i]
        current_width += cw
        i += 1

    return f"{result}\x1b[0m{ellipsis}"
