"""
Configuration constants and environment overrides.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .render import PromptTheme, default_theme, plain_theme

logger = logging.getLogger(__name__)

APP_NAME: str = "pulse-tty"
VERSION: str = "0.1.0"
ENV_PREFIX: str = "PULSE_TTY_"

# Exit status of a process ended by Ctrl+C (128 + SIGINT)
INTERRUPT_EXIT_CODE: int = 130

DEFAULT_ESCAPE_TIMEOUT_MS: int = 50

# Bytes requested per read from stdin
READ_SIZE: int = 32

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


@dataclass
class PromptConfig:
    # How long a pending ESC waits for the rest of its sequence
    escape_timeout_ms: int = DEFAULT_ESCAPE_TIMEOUT_MS
    exit_on_interrupt: bool = False
    force_fallback: bool = False
    color: bool = True
    write_log: str = ""

    def theme(self) -> PromptTheme:
        return default_theme() if self.color else plain_theme()


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning("Ignoring %s=%r: expected a boolean", name, raw)
    return default


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: expected an integer", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", name, raw)
        return default
    return value


def load_config(env: Mapping[str, str] | None = None) -> PromptConfig:
    """Build a PromptConfig from PULSE_TTY_* variables (and NO_COLOR)."""
    if env is None:
        env = os.environ
    return PromptConfig(
        escape_timeout_ms=_env_int(env, f"{ENV_PREFIX}ESCAPE_TIMEOUT_MS", DEFAULT_ESCAPE_TIMEOUT_MS),
        exit_on_interrupt=_env_bool(env, f"{ENV_PREFIX}EXIT_ON_INTERRUPT", False),
        force_fallback=_env_bool(env, f"{ENV_PREFIX}FORCE_FALLBACK", False),
        color=not env.get("NO_COLOR"),
        write_log=env.get(f"{ENV_PREFIX}WRITE_LOG", ""),
    )
