"""SelectPrompt — pick one option from a list with the arrow keys."""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Callable, Mapping

from ..fallback import ask_line, parse_choice
from ..keys import KeyType
from ..prompt import Prompt
from ..render import PromptTheme
from ..terminal import Terminal


def _normalize_to_single_line(text: str) -> str:
    return re.sub(r"[\r\n]+", " ", text).strip()


@dataclass(frozen=True)
class SelectState:
    selected: int


class SelectPrompt(Prompt[SelectState, int]):
    """
    Interactive list with keyboard navigation.
    Up/down move the selection (no wrap-around), 1-9 jump to an option.
    """

    def __init__(
        self,
        question: str,
        options: list[str],
        default_index: int = 0,
        theme: PromptTheme | None = None,
    ) -> None:
        super().__init__(question, theme)
        self.options = [_normalize_to_single_line(o) for o in options]
        last = max(0, len(self.options) - 1)
        self.default_index = max(0, min(default_index, last))

    def initial_state(self) -> SelectState:
        return SelectState(self.default_index)

    def _move(self, delta: int) -> Callable[[SelectState], SelectState]:
        last = len(self.options) - 1

        def move(state: SelectState) -> SelectState:
            return replace(state, selected=max(0, min(state.selected + delta, last)))

        return move

    def transitions(self) -> Mapping[KeyType, Callable[[SelectState], SelectState]]:
        return {
            KeyType.UP: self._move(-1),
            KeyType.DOWN: self._move(1),
        }

    def on_char(self, state: SelectState, text: str) -> SelectState:
        if text.isascii() and text.isdigit():
            num = int(text)
            if 1 <= num <= len(self.options):
                return replace(state, selected=num - 1)
        return state

    def render(self, state: SelectState, width: int) -> list[str]:
        theme = self.theme or PromptTheme()
        lines = [theme.question(self.question)]
        for i, option in enumerate(self.options):
            if i == state.selected:
                lines.append(theme.selected(f"{theme.marker} {option}"))
            else:
                lines.append("  " + theme.unselected(option))
        return lines

    def finalize(self, state: SelectState) -> int:
        return state.selected

    def fallback(self, terminal: Terminal) -> int:
        lines = [self.question]
        for i, option in enumerate(self.options):
            marker = ">" if i == self.default_index else " "
            lines.append(f"  {marker} {i + 1}. {option}")
        terminal.write("\n".join(lines) + "\n")
        line = ask_line(terminal, f"Choice [{self.default_index + 1}]: ")
        return parse_choice(line, len(self.options), self.default_index)
