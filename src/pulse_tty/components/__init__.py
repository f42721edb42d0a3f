"""
pulse_tty.components — the four prompt widgets.
"""
from .confirm import ConfirmPrompt, ConfirmState
from .input import InputPrompt, InputState
from .rating import RatingPrompt, RatingState
from .select import SelectPrompt, SelectState

__all__ = [
    "ConfirmPrompt",
    "ConfirmState",
    "InputPrompt",
    "InputState",
    "RatingPrompt",
    "RatingState",
    "SelectPrompt",
    "SelectState",
]
