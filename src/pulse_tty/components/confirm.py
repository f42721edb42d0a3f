"""ConfirmPrompt — yes/no question."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Mapping

from ..fallback import ask_line, confirm_hint, parse_confirm
from ..keys import KeyType
from ..prompt import Prompt
from ..render import PromptTheme
from ..terminal import Terminal


@dataclass(frozen=True)
class ConfirmState:
    value: bool


def _toggle(state: ConfirmState) -> ConfirmState:
    return replace(state, value=not state.value)


class ConfirmPrompt(Prompt[ConfirmState, bool]):
    """Arrows toggle between Yes and No; y/n pick directly."""

    def __init__(self, question: str, default: bool = False, theme: PromptTheme | None = None) -> None:
        super().__init__(question, theme)
        self.default = default

    def initial_state(self) -> ConfirmState:
        return ConfirmState(self.default)

    def transitions(self) -> Mapping[KeyType, Callable[[ConfirmState], ConfirmState]]:
        return dict.fromkeys((KeyType.UP, KeyType.DOWN, KeyType.LEFT, KeyType.RIGHT), _toggle)

    def on_char(self, state: ConfirmState, text: str) -> ConfirmState:
        lower = text.lower()
        if lower == "y":
            return replace(state, value=True)
        if lower == "n":
            return replace(state, value=False)
        return state

    def render(self, state: ConfirmState, width: int) -> list[str]:
        theme = self.theme or PromptTheme()
        yes = theme.active("Yes") if state.value else theme.inactive("Yes")
        no = theme.inactive("No") if state.value else theme.active("No")
        return [f"{theme.question(self.question)} {yes} / {no}"]

    def finalize(self, state: ConfirmState) -> bool:
        return state.value

    def fallback(self, terminal: Terminal) -> bool:
        line = ask_line(terminal, f"{self.question} {confirm_hint(self.default)}: ")
        return parse_confirm(line, self.default)
