"""Utilities for parsing compact action strings such as ``"IF MoistureAbove 10 TREAT"``."""

from __future__ import annotations

from typing import List, Optional
import logging
import re

from .base import Action
from .builtin import ConditionalTreat, Cut, Dry, Treat

logger = logging.getLogger(__name__)

_SEGMENT_SPLIT = re.compile(r"[;\n]")


def _parse_float(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


def parse_action_string(text: str) -> Optional[Action]:
    """Parse a single command like ``"CUT 2.5"`` into an :class:`Action`.

    Returns ``None`` (and logs a warning) when the command is not understood.
    """
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return None
    cmd = parts[0].upper()
    arg_str = parts[1].strip() if len(parts) > 1 else ""
    logger.debug("parse_action_string cmd=%s arg_str=%s", cmd, arg_str)

    if cmd == "CUT":
        length = _parse_float(arg_str)
        if length is None:
            logger.warning("Invalid length for CUT: '%s'", arg_str)
            return None
        return Cut(length=length)
    if cmd == "DRY" and not arg_str:
        return Dry()
    if cmd == "TREAT" and not arg_str:
        return Treat()

    if cmd == "IF":
        cond_parts = arg_str.split(maxsplit=2)
        if len(cond_parts) < 3:
            logger.warning("Incomplete IF command: '%s'", text.strip())
            return None
        condition, threshold_str, inner_text = cond_parts
        threshold = _parse_float(threshold_str)
        if threshold is None:
            logger.warning("Invalid threshold for IF: '%s'", threshold_str)
            return None
        inner = parse_action_string(inner_text)
        if inner is None:
            logger.warning("Invalid inner action for IF: '%s'", inner_text)
            return None
        return ConditionalTreat(inner=inner, condition=condition, threshold=threshold)

    logger.warning("No match for action command '%s'", text.strip())
    return None


def parse_action_list(text: str) -> List[Action]:
    """Parse ``;`` or newline separated commands, skipping invalid ones."""

    actions: List[Action] = []
    for segment in _SEGMENT_SPLIT.split(text):
        if not segment.strip():
            continue
        action = parse_action_string(segment)
        if action is not None:
            actions.append(action)
    return actions


__all__ = ["parse_action_string", "parse_action_list"]
