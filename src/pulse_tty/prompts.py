"""
Public prompt functions.

Each call blocks until answered. Ctrl+C raises PromptCancelled (or exits
with status 130 when configured), so treat every call as possibly
non-returning.
"""
from __future__ import annotations

from .components import ConfirmPrompt, InputPrompt, RatingPrompt, SelectPrompt
from .config import PromptConfig
from .prompt import run_prompt
from .terminal import Terminal


def select(
    question: str,
    options: list[str],
    default_index: int = 0,
    *,
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> int:
    """Return the index of the chosen option, or -1 if there are no options."""
    if not options:
        return -1
    return run_prompt(SelectPrompt(question, options, default_index), terminal, config)


def input(
    question: str,
    default: str = "",
    *,
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> str:
    return run_prompt(InputPrompt(question, default), terminal, config)


def rating(
    question: str,
    min: int = 1,
    max: int = 5,
    default: int = 3,
    *,
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> int:
    return run_prompt(RatingPrompt(question, min, max, default), terminal, config)


def confirm(
    question: str,
    default: bool = False,
    *,
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> bool:
    return run_prompt(ConfirmPrompt(question, default), terminal, config)
