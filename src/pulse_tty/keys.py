"""
Keyboard input decoding.

Turns raw bytes read from stdin (in raw mode) into Key events.

API:
- decode_key(chunk) — classify one whole read as a single Key
- KeyDecoder — incremental parser that keeps an unfinished escape
  sequence pending across reads
- KEY — helper constants for the special keys
"""
from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Key event
# ─────────────────────────────────────────────────────────────────────────────

class KeyType(str, Enum):
    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    INTERRUPT = "interrupt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Key:
    type: KeyType
    char: str = ""

    @staticmethod
    def of(text: str) -> "Key":
        return Key(KeyType.CHAR, text)


class _KeyHelper:
    """Ready-made Key instances for the non-text keys."""

    enter = Key(KeyType.ENTER)
    escape = Key(KeyType.ESCAPE)
    backspace = Key(KeyType.BACKSPACE)
    up = Key(KeyType.UP)
    down = Key(KeyType.DOWN)
    left = Key(KeyType.LEFT)
    right = Key(KeyType.RIGHT)
    interrupt = Key(KeyType.INTERRUPT)
    unknown = Key(KeyType.UNKNOWN)


KEY = _KeyHelper()

# ─────────────────────────────────────────────────────────────────────────────
# Byte constants
# ─────────────────────────────────────────────────────────────────────────────

_CTRL_C = 0x03
_BS = 0x08
_CR = 13
_ESC = 27
_DEL = 127
_LEFT_BRACKET = 0x5B
_SS3 = 0x4F  # "O": ESC O <final> (F1-F4, application-mode Home/End)

_ARROWS: dict[int, Key] = {
    0x41: KEY.up,
    0x42: KEY.down,
    0x43: KEY.right,
    0x44: KEY.left,
}

_SINGLE_BYTE: dict[int, Key] = {
    _CTRL_C: KEY.interrupt,
    _CR: KEY.enter,
    _DEL: KEY.backspace,
    _BS: KEY.backspace,
}

# Longest CSI sequence we are willing to hold while waiting for its final byte
_MAX_PENDING = 16


# ─────────────────────────────────────────────────────────────────────────────
# Single-read classification
# ─────────────────────────────────────────────────────────────────────────────

def decode_key(chunk: bytes) -> Key:
    """
    Classify one read from stdin as exactly one Key.

    Only the leading bytes decide the key. A lone ESC is the Escape key,
    ESC [ A..D are the arrows and anything else after ESC is unknown. Any
    other leading byte makes the whole chunk a single text event, so a
    multi-byte character arrives as one Key.
    """
    if not chunk:
        return KEY.unknown

    first = chunk[0]
    special = _SINGLE_BYTE.get(first)
    if special is not None:
        return special

    if first == _ESC:
        if len(chunk) == 1:
            return KEY.escape
        if len(chunk) >= 3 and chunk[1] == _LEFT_BRACKET:
            arrow = _ARROWS.get(chunk[2])
            if arrow is not None:
                return arrow
        return KEY.unknown

    return Key.of(chunk.decode("utf-8", errors="replace"))


# ─────────────────────────────────────────────────────────────────────────────
# Incremental decoder
# ─────────────────────────────────────────────────────────────────────────────

def _is_printable(b: int) -> bool:
    return 0x20 <= b <= 0x7E


def _csi_end(buf: bytes, start: int) -> int:
    """
    Index one past the final byte of the CSI sequence whose parameters begin
    at start, or -1 if the sequence is not finished yet.
    """
    for i in range(start, len(buf)):
        if 0x40 <= buf[i] <= 0x7E:
            return i + 1
    return -1


class KeyDecoder:
    """
    Incremental key parser.

    Keeps an escape prefix that arrived at the end of a read pending until
    the rest of the sequence shows up (or flush() is called), so an arrow
    key split across two reads is still decoded as an arrow.
    """

    def __init__(self) -> None:
        self._pending = b""
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def pending(self) -> bool:
        return bool(self._pending)

    def feed(self, data: bytes) -> list[Key]:
        """Parse data and return every complete key in it."""
        if not data:
            # End of stream: resolve anything held, then report the empty read
            return self.flush() + [KEY.unknown]

        buf = self._pending + data
        self._pending = b""
        keys: list[Key] = []
        i = 0
        n = len(buf)

        while i < n:
            b = buf[i]

            special = _SINGLE_BYTE.get(b)
            if special is not None:
                keys.extend(self._drain_text())
                keys.append(special)
                i += 1
                continue

            if b == _ESC:
                keys.extend(self._drain_text())
                if i + 1 >= n:
                    self._pending = buf[i:]
                    break
                follow = buf[i + 1]
                if not _is_printable(follow):
                    # ESC, then a control byte of its own (Ctrl+C, Enter, ESC...)
                    keys.append(KEY.escape)
                    i += 1
                    continue
                if follow == _SS3:
                    if i + 2 >= n:
                        self._pending = buf[i:]
                        break
                    keys.append(KEY.unknown)
                    i += 3 if _is_printable(buf[i + 2]) else 2
                    continue
                if follow != _LEFT_BRACKET:
                    keys.append(KEY.unknown)
                    i += 2
                    continue
                if i + 2 >= n:
                    self._pending = buf[i:]
                    break
                arrow = _ARROWS.get(buf[i + 2])
                if arrow is not None:
                    keys.append(arrow)
                    i += 3
                    continue
                end = _csi_end(buf, i + 2)
                if end == -1:
                    if n - i > _MAX_PENDING:
                        keys.append(KEY.unknown)
                        break
                    self._pending = buf[i:]
                    break
                keys.append(KEY.unknown)
                i = end
                continue

            # Run of plain bytes up to the next control byte we interpret
            j = i
            while j < n and buf[j] != _ESC and buf[j] not in _SINGLE_BYTE:
                j += 1
            text = self._text.decode(buf[i:j])
            keys.extend(Key.of(ch) for ch in text)
            i = j

        if keys:
            logger.debug("decoded %s", [k.type.value for k in keys])
        return keys

    def flush(self) -> list[Key]:
        """Resolve a held prefix: a lone ESC is Escape, anything longer is unknown."""
        held = self._pending
        self._pending = b""
        if not held:
            return []
        if held == bytes([_ESC]):
            return [KEY.escape]
        return [KEY.unknown]

    def reset(self) -> None:
        self._pending = b""
        self._text.reset()

    def _drain_text(self) -> list[Key]:
        tail = self._text.decode(b"", final=True)
        self._text.reset()
        return [Key.of(ch) for ch in tail]
