"""Built-in processing actions: cutting, drying and (conditional) treatment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union
import logging

from .base import Action

if TYPE_CHECKING:
    from ..core.item import Item

logger = logging.getLogger(__name__)

# Fraction of moisture left after one drying pass.
DRY_FACTOR = 0.8


class ConditionKind(str, Enum):
    """Predicates a :class:`ConditionalTreat` knows how to evaluate."""

    MOISTURE_ABOVE = "MoistureAbove"


# ------------------------------------------------------------------
# Action dataclasses
# ------------------------------------------------------------------
@dataclass(slots=True)
class Cut(Action):
    """Record a cut length. Item geometry is not modelled yet."""
    length: float

    def apply(self, item: "Item") -> None:
        logger.debug("Cut length=%s on %s (no state change)", self.length, item.species)


@dataclass(slots=True)
class Dry(Action):
    """Remove a fifth of the item's moisture per application."""

    def apply(self, item: "Item") -> None:
        before = item.moisture_content
        item.set_moisture(before * DRY_FACTOR)
        logger.debug(
            "Dry %s moisture %.4f -> %.4f", item.species, before, item.moisture_content
        )


@dataclass(slots=True)
class Treat(Action):
    """Mark the item as chemically treated."""

    def apply(self, item: "Item") -> None:
        item.set_treated(True)
        logger.debug("Treat %s", item.species)


@dataclass(slots=True)
class ConditionalTreat(Action):
    """Run ``inner`` only while the item satisfies ``condition``.

    ``condition`` is a :class:`ConditionKind` or its string value. Kinds that
    are not recognised never match, so the wrapped action is simply skipped.
    """
    inner: Action
    condition: Union[ConditionKind, str]
    threshold: float

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Action):
            raise TypeError(
                f"ConditionalTreat wraps an Action, got {type(self.inner).__name__}"
            )

    def matches(self, item: "Item") -> bool:
        """Return ``True`` if ``item`` currently satisfies the condition."""
        kind = _resolve_kind(self.condition)
        if kind is ConditionKind.MOISTURE_ABOVE:
            return item.moisture_content > self.threshold
        logger.debug(
            "Unrecognised condition kind %r on %s; treating as no match",
            self.condition,
            item.species,
        )
        return False

    def apply(self, item: "Item") -> None:
        if self.matches(item):
            self.inner.apply(item)
        else:
            logger.debug(
                "ConditionalTreat skipped %s for %s (moisture=%.4f threshold=%s)",
                type(self.inner).__name__,
                item.species,
                item.moisture_content,
                self.threshold,
            )


def _resolve_kind(condition: Union[ConditionKind, str]) -> ConditionKind | None:
    if isinstance(condition, ConditionKind):
        return condition
    try:
        return ConditionKind(condition)
    except ValueError:
        return None


__all__ = [
    "DRY_FACTOR",
    "ConditionKind",
    "Cut",
    "Dry",
    "Treat",
    "ConditionalTreat",
]
