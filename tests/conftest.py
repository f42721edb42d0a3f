"""Shared fixtures: a scripted in-memory terminal."""
from __future__ import annotations

from typing import Callable

import pytest

from pulse_tty.config import PromptConfig
from pulse_tty.terminal import Terminal


class FakeTerminal(Terminal):
    """
    Terminal double fed from a script.

    chunks: raw reads returned one per read() call; a None entry simulates
    a read that timed out. lines: answers for read_line().
    """

    def __init__(
        self,
        chunks: list[bytes | None] | None = None,
        lines: list[str] | None = None,
        interactive: bool = True,
        columns: int = 80,
    ) -> None:
        super().__init__()
        self._chunks = list(chunks or [])
        self._lines = list(lines or [])
        self._interactive = interactive
        self._columns = columns
        self.events: list[str] = []
        self.writes: list[str] = []
        self.read_timeouts: list[float | None] = []

    def is_interactive(self) -> bool:
        return self._interactive

    def read(self, timeout: float | None = None) -> bytes | None:
        self.read_timeouts.append(timeout)
        if not self._chunks:
            raise AssertionError("prompt asked for more input than the script provides")
        self.events.append("read")
        return self._chunks.pop(0)

    def read_line(self) -> str:
        self.events.append("read_line")
        return self._lines.pop(0) if self._lines else ""

    def write(self, data: str) -> None:
        self.events.append("write")
        self.writes.append(data)

    @property
    def columns(self) -> int:
        return self._columns

    def _enter_raw(self) -> Callable[[], None]:
        self.events.append("raw-on")

        def restore() -> None:
            self.events.append("raw-off")

        return restore

    @property
    def output(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def make_terminal():
    return FakeTerminal


@pytest.fixture
def config() -> PromptConfig:
    return PromptConfig()
