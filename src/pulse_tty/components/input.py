"""InputPrompt — single-line text entry with a default."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Mapping

from ..fallback import ask_line, parse_text
from ..keys import KeyType
from ..prompt import Prompt
from ..render import PromptTheme
from ..terminal import Terminal


@dataclass(frozen=True)
class InputState:
    buffer: str = ""


def _backspace(state: InputState) -> InputState:
    if not state.buffer:
        return state
    return replace(state, buffer=state.buffer[:-1])


class InputPrompt(Prompt[InputState, str]):
    """
    Append-only line editor: typing appends, backspace removes the last
    character. An empty answer means the default.
    """

    hide_cursor = False

    def __init__(self, question: str, default: str = "", theme: PromptTheme | None = None) -> None:
        super().__init__(question, theme)
        self.default = default

    def initial_state(self) -> InputState:
        return InputState()

    def transitions(self) -> Mapping[KeyType, Callable[[InputState], InputState]]:
        return {KeyType.BACKSPACE: _backspace}

    def on_char(self, state: InputState, text: str) -> InputState:
        # Control characters would break the single-line frame
        printable = "".join(ch for ch in text if ch.isprintable())
        if not printable:
            return state
        return replace(state, buffer=state.buffer + printable)

    def render(self, state: InputState, width: int) -> list[str]:
        theme = self.theme or PromptTheme()
        question = theme.question(self.question)
        if state.buffer:
            return [f"{question}: {state.buffer}"]
        if self.default:
            return [f"{question}: {theme.placeholder(self.default)}"]
        return [f"{question}: "]

    def finalize(self, state: InputState) -> str:
        return state.buffer or self.default

    def fallback(self, terminal: Terminal) -> str:
        suffix = f" [{self.default}]" if self.default else ""
        line = ask_line(terminal, f"{self.question}{suffix}: ")
        return parse_text(line, self.default)
