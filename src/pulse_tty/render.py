"""
Frame rendering for inline prompts.

InlineRenderer repaints a block of lines in place: each frame moves the
cursor back to the first line of the previous frame and overwrites it, so
redraws never scroll. PromptTheme holds the styling callables widgets use.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from . import ansi
from .utils import truncate_to_width

if TYPE_CHECKING:
    from .terminal import Terminal


def _identity(text: str) -> str:
    return text


@dataclass
class PromptTheme:
    question: Callable[[str], str] = field(default=_identity)
    selected: Callable[[str], str] = field(default=_identity)
    unselected: Callable[[str], str] = field(default=_identity)
    active: Callable[[str], str] = field(default=_identity)
    inactive: Callable[[str], str] = field(default=_identity)
    placeholder: Callable[[str], str] = field(default=_identity)
    marker: str = "❯"


def default_theme() -> PromptTheme:
    return PromptTheme(
        question=_identity,
        selected=lambda s: ansi.style(s, ansi.COLORS["cyan"]),
        unselected=ansi.dim,
        active=lambda s: ansi.style(s, ansi.COLORS["cyan"], ansi.BOLD),
        inactive=ansi.dim,
        placeholder=ansi.dim,
    )


def plain_theme() -> PromptTheme:
    """Theme without SGR codes, used when colour output is disabled."""
    return PromptTheme(marker=">")


class InlineRenderer:
    """
    Repaints a prompt frame in place with one write per frame.

    The cursor is left at the end of the last frame line. Before the next
    frame it is moved back up by (previous height - 1) lines.
    """

    def __init__(self, terminal: "Terminal") -> None:
        self._terminal = terminal
        self._rendered_lines = 0
        self._frames = 0

    @property
    def rendered_lines(self) -> int:
        return self._rendered_lines

    @property
    def frames(self) -> int:
        return self._frames

    def render(self, lines: list[str]) -> None:
        width = self._terminal.columns
        buf = "\r"
        if self._rendered_lines > 1:
            buf += ansi.cursor_up(self._rendered_lines - 1)

        # Wrapped lines would throw off the cursor-up count next frame
        fitted = [truncate_to_width(line, max(1, width - 1)) for line in lines] or [""]
        buf += "\r\n".join(ansi.CLEAR_LINE + line for line in fitted)

        if len(fitted) < self._rendered_lines:
            buf += ansi.CLEAR_BELOW

        self._terminal.write(buf)
        self._rendered_lines = len(fitted)
        self._frames += 1

    def finish(self) -> None:
        """Leave the frame as-is and move the cursor to the start of the next line."""
        if self._rendered_lines:
            self._terminal.write("\r\n")
        self._rendered_lines = 0
