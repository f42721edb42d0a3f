"""
Terminal abstraction.

Provides:
- Terminal: abstract base class (interface)
- RawMode: handle for one raw-mode session
- ProcessTerminal: real terminal using sys.stdin/sys.stdout + termios
"""
from __future__ import annotations

import logging
import os
import select
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Callable, Iterator, TextIO

from . import ansi
from .config import READ_SIZE

try:
    import termios
    import tty
    _HAS_TERMIOS = True
except ImportError:
    _HAS_TERMIOS = False

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """Raw mode could not be engaged or restored."""


# ─────────────────────────────────────────────────────────────────────────────
# RawMode handle
# ─────────────────────────────────────────────────────────────────────────────

class RawMode:
    """
    One engaged raw-mode session.

    Created by Terminal.engage_raw_mode(); release() hands the terminal back
    in the mode it was in before. Releasing twice is a no-op.
    """

    def __init__(self, restore: Callable[[], None]) -> None:
        self._restore = restore
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def release(self) -> None:
        if not self._active:
            return
        self._active = False
        self._restore()


# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """Minimal terminal interface used by the prompt loop."""

    def __init__(self) -> None:
        self._raw: RawMode | None = None

    @abstractmethod
    def is_interactive(self) -> bool:
        """Whether stdin is an interactive terminal device."""

    @abstractmethod
    def read(self, timeout: float | None = None) -> bytes | None:
        """
        Read the next chunk of raw input.
        Returns None if timeout (seconds) expires first, b"" at end of stream.
        """

    @abstractmethod
    def read_line(self) -> str:
        """Read one line in cooked mode. Returns "" at end of input."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write output to the terminal."""

    @property
    @abstractmethod
    def columns(self) -> int:
        """Terminal width in columns."""

    @abstractmethod
    def _enter_raw(self) -> Callable[[], None]:
        """Switch the device to raw mode; return a function that undoes it."""

    @property
    def raw_mode_engaged(self) -> bool:
        return self._raw is not None and self._raw.active

    def engage_raw_mode(self) -> RawMode:
        if self.raw_mode_engaged:
            raise TerminalError("Raw mode is already engaged; only one prompt may run at a time")
        restore = self._enter_raw()
        handle = RawMode(restore)
        self._raw = handle
        logger.debug("raw mode engaged")
        return handle

    @contextmanager
    def raw_mode(self) -> Iterator[RawMode]:
        """Engage raw mode for the duration of the block, restoring it on every exit path."""
        handle = self.engage_raw_mode()
        try:
            yield handle
        finally:
            handle.release()
            self._raw = None
            logger.debug("raw mode released")

    def hide_cursor(self) -> None:
        self.write(ansi.HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(ansi.SHOW_CURSOR)


# ─────────────────────────────────────────────────────────────────────────────
# ProcessTerminal
# ─────────────────────────────────────────────────────────────────────────────

class ProcessTerminal(Terminal):
    """
    Real terminal using sys.stdin/sys.stdout.
    Raw mode via termios; input read unbuffered from the stdin file descriptor.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        write_log: str = "",
    ) -> None:
        super().__init__()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._write_log_path = write_log

    def _fileno(self) -> int | None:
        try:
            return self._stdin.fileno()
        except (AttributeError, ValueError, OSError):
            return None

    def is_interactive(self) -> bool:
        if not _HAS_TERMIOS:
            return False
        try:
            return self._stdin.isatty()
        except (AttributeError, ValueError):
            return False

    def _enter_raw(self) -> Callable[[], None]:
        fd = self._fileno()
        if not _HAS_TERMIOS or fd is None or not os.isatty(fd):
            raise TerminalError("stdin is not a terminal")
        try:
            saved = termios.tcgetattr(fd)
            tty.setraw(fd, termios.TCSADRAIN)
        except termios.error as e:
            raise TerminalError(f"Could not enable raw mode: {e}") from e

        def restore() -> None:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            except termios.error as e:
                raise TerminalError(f"Could not restore terminal mode: {e}") from e

        return restore

    def read(self, timeout: float | None = None) -> bytes | None:
        fd = self._fileno()
        if fd is None:
            return b""
        r, _, _ = select.select([fd], [], [], timeout)
        if not r:
            return None
        return os.read(fd, READ_SIZE)

    def read_line(self) -> str:
        return self._stdin.readline()

    def write(self, data: str) -> None:
        self._stdout.write(data)
        self._stdout.flush()
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError as e:
                logger.warning("Could not append to write log %s: %s", self._write_log_path, e)

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (AttributeError, ValueError, OSError):
            return int(os.environ.get("COLUMNS", "80"))
