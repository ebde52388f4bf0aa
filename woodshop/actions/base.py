from __future__ import annotations

"""Base interface for wood processing actions."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.item import Item


class Action(ABC):
    """Abstract base class for every processing step attached to an item."""

    __slots__ = ()

    @abstractmethod
    def apply(self, item: "Item") -> None:
        """Perform the action on ``item``, mutating its state in place."""
        raise NotImplementedError


__all__ = ["Action"]
