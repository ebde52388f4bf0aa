"""Wood item with its ordered processing steps."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple
import logging
import weakref

from ..actions.base import Action

logger = logging.getLogger(__name__)


class Item:
    """A piece of wood and the actions to apply to it.

    ``species`` and ``thickness`` are fixed at construction. Moisture and
    treatment state change only through :meth:`set_moisture` and
    :meth:`set_treated`, which actions call from :meth:`process`.

    Actions keep no state beyond their construction parameters, so one
    action instance may be listed by several items or wrapped more than once.
    """

    __slots__ = ("_species", "_thickness", "_moisture_content", "_is_treated", "_actions", "_owner")

    def __init__(
        self,
        species: str,
        thickness: float,
        moisture_content: float,
        is_treated: bool = False,
        actions: Iterable[Action] = (),
    ) -> None:
        self._species = species
        self._thickness = thickness
        self._moisture_content = moisture_content
        self._is_treated = is_treated
        self._actions: Tuple[Action, ...] = tuple(actions)
        # Weak so the holding inventory can be released while the item lives on.
        self._owner: Optional[weakref.ReferenceType[Any]] = None
        for action in self._actions:
            if not isinstance(action, Action):
                raise TypeError(f"Item actions must be Action, got {type(action).__name__}")

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def species(self) -> str:
        return self._species

    @property
    def thickness(self) -> float:
        return self._thickness

    @property
    def moisture_content(self) -> float:
        return self._moisture_content

    @property
    def is_treated(self) -> bool:
        return self._is_treated

    @property
    def actions(self) -> Tuple[Action, ...]:
        return self._actions

    @property
    def owner(self) -> Optional[Any]:
        """The inventory holding this item, or ``None`` once it is gone."""
        return self._owner() if self._owner is not None else None

    # ------------------------------------------------------------------
    # Mutation hooks
    # ------------------------------------------------------------------
    def set_owner(self, owner: Optional[Any]) -> None:
        """Record ``owner`` without keeping it alive. Used by ``Inventory``."""
        self._owner = weakref.ref(owner) if owner is not None else None

    def set_moisture(self, value: float) -> None:
        self._moisture_content = value

    def set_treated(self, flag: bool) -> None:
        self._is_treated = flag

    def process(self) -> None:
        """Apply every action once, in construction order."""
        logger.debug("Processing %s with %s action(s)", self._species, len(self._actions))
        for action in self._actions:
            action.apply(self)

    def __repr__(self) -> str:
        return (
            f"Item(species={self._species!r}, thickness={self._thickness!r}, "
            f"moisture_content={self._moisture_content!r}, is_treated={self._is_treated!r}, "
            f"actions={list(self._actions)!r})"
        )


__all__ = ["Item"]
