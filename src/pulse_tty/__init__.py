"""
pulse_tty — interactive terminal prompts with a line-based fallback.
"""
from . import ansi
from .components import ConfirmPrompt, InputPrompt, RatingPrompt, SelectPrompt
from .config import INTERRUPT_EXIT_CODE, VERSION, PromptConfig, load_config
from .keys import KEY, Key, KeyDecoder, KeyType, decode_key
from .prompt import Prompt, PromptCancelled, run_prompt
from .prompts import confirm, input, rating, select
from .render import InlineRenderer, PromptTheme, default_theme, plain_theme
from .terminal import ProcessTerminal, RawMode, Terminal, TerminalError
from .utils import truncate_to_width, visible_width

__version__ = VERSION

__all__ = [
    "ansi",
    # components
    "ConfirmPrompt",
    "InputPrompt",
    "RatingPrompt",
    "SelectPrompt",
    # config
    "INTERRUPT_EXIT_CODE",
    "PromptConfig",
    "load_config",
    # keys
    "KEY",
    "Key",
    "KeyDecoder",
    "KeyType",
    "decode_key",
    # prompt loop
    "Prompt",
    "PromptCancelled",
    "run_prompt",
    # prompts
    "confirm",
    "input",
    "rating",
    "select",
    # render
    "InlineRenderer",
    "PromptTheme",
    "default_theme",
    "plain_theme",
    # terminal
    "ProcessTerminal",
    "RawMode",
    "Terminal",
    "TerminalError",
    # utils
    "truncate_to_width",
    "visible_width",
]
