"""
ANSI control fragments.

Cursor movement, line clearing and SGR styling as plain strings, so a
widget can assemble a whole frame and write it in one call.
"""
from __future__ import annotations

ESC = "\x1b"
CSI = f"{ESC}["

# ─────────────────────────────────────────────────────────────────────────────
# Cursor
# ─────────────────────────────────────────────────────────────────────────────

HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CURSOR_SAVE = f"{ESC}7"
CURSOR_RESTORE = f"{ESC}8"


def cursor_up(n: int = 1) -> str:
    return f"{CSI}{n}A" if n > 0 else ""


def cursor_down(n: int = 1) -> str:
    return f"{CSI}{n}B" if n > 0 else ""


def cursor_to(col: int) -> str:
    """Move to a 1-based column on the current line."""
    return f"{CSI}{max(1, col)}G"


# ─────────────────────────────────────────────────────────────────────────────
# Erasing
# ─────────────────────────────────────────────────────────────────────────────

CLEAR_LINE = f"{CSI}2K"
CLEAR_TO_END = f"{CSI}0K"
CLEAR_BELOW = f"{CSI}J"

# ─────────────────────────────────────────────────────────────────────────────
# Style
# ─────────────────────────────────────────────────────────────────────────────

RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
DIM = f"{CSI}2m"

COLORS: dict[str, str] = {
    "red": f"{CSI}31m",
    "green": f"{CSI}32m",
    "yellow": f"{CSI}33m",
    "blue": f"{CSI}34m",
    "magenta": f"{CSI}35m",
    "cyan": f"{CSI}36m",
}


def style(text: str, *codes: str) -> str:
    if not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def bold(text: str) -> str:
    return style(text, BOLD)


def dim(text: str) -> str:
    return style(text, DIM)


def color(text: str, name: str) -> str:
    try:
        code = COLORS[name]
    except KeyError:
        raise ValueError(f"Unknown color: {name!r}") from None
    return style(text, code)
