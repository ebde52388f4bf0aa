"""Inventory of wood items."""

from __future__ import annotations

from typing import Iterator, List, Tuple
import logging

from .item import Item

logger = logging.getLogger(__name__)


class ItemOwnershipError(ValueError):
    """Raised when an item held by one inventory is added to another."""


class Inventory:
    """Ordered container that owns its items exclusively."""

    def __init__(self) -> None:
        self._items: List[Item] = []

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def add_item(self, item: Item) -> None:
        """Append ``item``; the same inventory may hold it more than once."""
        owner = item.owner
        if owner is not None and owner is not self:
            raise ItemOwnershipError(
                f"{item.species} item already belongs to another inventory"
            )
        item.set_owner(self)
        self._items.append(item)
        logger.debug("Added %s; inventory size %s", item.species, len(self._items))

    def remove_item(self, item: Item) -> None:
        """Remove the first occurrence of ``item`` and release it."""
        for index, held in enumerate(self._items):
            if held is item:
                del self._items[index]
                break
        else:
            raise ValueError(f"{item.species} item is not in this inventory")
        if not any(held is item for held in self._items):
            item.set_owner(None)

    def items(self) -> Tuple[Item, ...]:
        """Return the held items in insertion order."""
        return tuple(self._items)

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------
    def process_all(self) -> None:
        """Run :meth:`Item.process` on every item in insertion order."""
        logger.info("Processing %s item(s)", len(self._items))
        for item in self._items:
            item.process()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))


__all__ = ["Inventory", "ItemOwnershipError"]
