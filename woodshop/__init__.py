"""woodshop package."""

from .actions import ConditionKind, ConditionalTreat, Cut, Dry, Treat
from .core.inventory import Inventory, ItemOwnershipError
from .core.item import Item

__all__ = [
    "ConditionKind",
    "ConditionalTreat",
    "Cut",
    "Dry",
    "Treat",
    "Inventory",
    "ItemOwnershipError",
    "Item",
]
