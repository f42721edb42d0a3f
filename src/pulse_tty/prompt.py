"""
Generic interactive prompt loop.

A Prompt describes one widget: its initial state, how keys transform that
state, how the state is drawn and what the final answer is. run_prompt()
picks the interactive or the line-based path and drives the widget.
"""
from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, Mapping, TypeVar

from .config import INTERRUPT_EXIT_CODE, PromptConfig, load_config
from .keys import Key, KeyDecoder, KeyType
from .render import InlineRenderer, PromptTheme
from .terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")


class PromptCancelled(KeyboardInterrupt):
    """The user pressed Ctrl+C inside a prompt. Terminal state is already restored."""

    exit_code = INTERRUPT_EXIT_CODE


# ─────────────────────────────────────────────────────────────────────────────
# Prompt base class
# ─────────────────────────────────────────────────────────────────────────────

class Prompt(ABC, Generic[S, R]):
    """
    One widget's behaviour.

    Subclasses provide the state transitions as a table (transitions())
    plus on_char() for text keys; update() dispatches through them.
    """

    hide_cursor: bool = True

    def __init__(self, question: str, theme: PromptTheme | None = None) -> None:
        self.question = question
        self.theme = theme

    @abstractmethod
    def initial_state(self) -> S: ...

    @abstractmethod
    def render(self, state: S, width: int) -> list[str]: ...

    @abstractmethod
    def finalize(self, state: S) -> R: ...

    @abstractmethod
    def fallback(self, terminal: Terminal) -> R:
        """Line-based prompt used when stdin is not a terminal."""

    def transitions(self) -> Mapping[KeyType, Callable[[S], S]]:
        return {}

    def on_char(self, state: S, text: str) -> S:
        return state

    def update(self, state: S, key: Key) -> S:
        if key.type is KeyType.CHAR:
            return self.on_char(state, key.char)
        handler = self.transitions().get(key.type)
        if handler is None:
            return state
        return handler(state)

    def is_done(self, key: Key) -> bool:
        return key.type is KeyType.ENTER


# ─────────────────────────────────────────────────────────────────────────────
# Loop
# ─────────────────────────────────────────────────────────────────────────────

def _read_keys(terminal: Terminal, decoder: KeyDecoder, config: PromptConfig) -> Iterator[Key]:
    """Yield keys one at a time; a read is only issued once every decoded key was consumed."""
    while True:
        timeout = config.escape_timeout_ms / 1000.0 if decoder.pending else None
        chunk = terminal.read(timeout)
        if chunk is None:
            keys = decoder.flush()
        else:
            keys = decoder.feed(chunk)
        yield from keys


def _run_interactive(prompt: Prompt[S, R], terminal: Terminal, config: PromptConfig) -> R:
    if prompt.theme is None:
        prompt.theme = config.theme()

    state = prompt.initial_state()
    renderer = InlineRenderer(terminal)
    decoder = KeyDecoder()

    with terminal.raw_mode():
        if prompt.hide_cursor:
            terminal.hide_cursor()
        try:
            renderer.render(prompt.render(state, terminal.columns))
            for key in _read_keys(terminal, decoder, config):
                if key.type is KeyType.INTERRUPT:
                    raise PromptCancelled()
                if prompt.is_done(key):
                    break
                new_state = prompt.update(state, key)
                if new_state != state:
                    state = new_state
                    renderer.render(prompt.render(state, terminal.columns))
        finally:
            renderer.finish()
            if prompt.hide_cursor:
                terminal.show_cursor()

    return prompt.finalize(state)


def run_prompt(
    prompt: Prompt[S, R],
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> R:
    """
    Run a prompt to completion and return its answer.

    Raises PromptCancelled on Ctrl+C, after the terminal has been restored,
    or ends the process with INTERRUPT_EXIT_CODE when
    config.exit_on_interrupt is set.
    """
    if config is None:
        config = load_config()
    if terminal is None:
        terminal = ProcessTerminal(write_log=config.write_log)

    if config.force_fallback or not terminal.is_interactive():
        logger.debug("stdin is not interactive; using line prompt for %r", prompt.question)
        result = prompt.fallback(terminal)
    else:
        try:
            result = _run_interactive(prompt, terminal, config)
        except PromptCancelled:
            logger.debug("prompt %r cancelled", prompt.question)
            if config.exit_on_interrupt:
                sys.exit(INTERRUPT_EXIT_CODE)
            raise

    logger.debug("prompt %r answered %r", prompt.question, result)
    return result
