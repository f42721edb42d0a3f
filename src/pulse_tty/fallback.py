"""
Line-based prompting for non-interactive stdin (pipes, CI).

The parse_* helpers turn one line of input into an answer. Anything they
cannot use yields the supplied default; none of them raise.
"""
from __future__ import annotations

from .terminal import Terminal


def ask_line(terminal: Terminal, prompt: str) -> str:
    """Write prompt and read one line; end of input reads as blank."""
    terminal.write(prompt)
    return terminal.read_line()


def _parse_int(line: str) -> int | None:
    try:
        return int(line.strip())
    except ValueError:
        return None


def parse_choice(line: str, count: int, default_index: int) -> int:
    """A 1-based number in [1, count] selects that option; anything else the default."""
    num = _parse_int(line)
    if num is not None and 1 <= num <= count:
        return num - 1
    return default_index


def parse_text(line: str, default: str) -> str:
    text = line.strip()
    return text if text else default


def parse_rating(line: str, minimum: int, maximum: int, default: int) -> int:
    num = _parse_int(line)
    if num is not None and minimum <= num <= maximum:
        return num
    return default


def parse_confirm(line: str, default: bool) -> bool:
    answer = line.strip().lower()
    if answer in ("y", "yes"):
        return True
    if answer in ("n", "no"):
        return False
    return default


def confirm_hint(default: bool) -> str:
    return "[Y/n]" if default else "[y/N]"
