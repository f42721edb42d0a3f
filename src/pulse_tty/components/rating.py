"""RatingPrompt — pick a value on a bounded integer scale."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Mapping

from ..fallback import ask_line, parse_rating
from ..keys import KeyType
from ..prompt import Prompt
from ..render import PromptTheme
from ..terminal import Terminal


@dataclass(frozen=True)
class RatingState:
    value: int


class RatingPrompt(Prompt[RatingState, int]):
    def __init__(
        self,
        question: str,
        minimum: int = 1,
        maximum: int = 5,
        default: int = 3,
        theme: PromptTheme | None = None,
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"Rating minimum {minimum} is greater than maximum {maximum}")
        super().__init__(question, theme)
        self.minimum = minimum
        self.maximum = maximum
        self.default = max(minimum, min(default, maximum))

    def initial_state(self) -> RatingState:
        return RatingState(self.default)

    def _decrement(self, state: RatingState) -> RatingState:
        return replace(state, value=max(self.minimum, state.value - 1))

    def _increment(self, state: RatingState) -> RatingState:
        return replace(state, value=min(self.maximum, state.value + 1))

    def transitions(self) -> Mapping[KeyType, Callable[[RatingState], RatingState]]:
        return {
            KeyType.LEFT: self._decrement,
            KeyType.DOWN: self._decrement,
            KeyType.RIGHT: self._increment,
            KeyType.UP: self._increment,
        }

    def on_char(self, state: RatingState, text: str) -> RatingState:
        if text.isascii() and text.isdigit():
            num = int(text)
            if self.minimum <= num <= self.maximum:
                return replace(state, value=num)
        return state

    def render(self, state: RatingState, width: int) -> list[str]:
        theme = self.theme or PromptTheme()
        scale = " ".join(
            theme.active(str(v)) if v == state.value else theme.inactive(str(v))
            for v in range(self.minimum, self.maximum + 1)
        )
        return [f"{theme.question(self.question)}: {scale}"]

    def finalize(self, state: RatingState) -> int:
        return state.value

    def fallback(self, terminal: Terminal) -> int:
        line = ask_line(
            terminal,
            f"{self.question} ({self.minimum}-{self.maximum}) [{self.default}]: ",
        )
        return parse_rating(line, self.minimum, self.maximum, self.default)
