"""actions package."""

from .base import Action
from .builtin import DRY_FACTOR, ConditionKind, ConditionalTreat, Cut, Dry, Treat
from .parser import parse_action_list, parse_action_string

__all__ = [
    "Action",
    "DRY_FACTOR",
    "ConditionKind",
    "ConditionalTreat",
    "Cut",
    "Dry",
    "Treat",
    "parse_action_list",
    "parse_action_string",
]
