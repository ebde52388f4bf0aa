from abc import ABC, abstractmethod

from ..core.inventory import Inventory


class BaseScenario(ABC):
    """Abstract base class for inventory processing scenarios."""

    #: Whether the runner calls ``process_all`` between setup and check.
    process: bool = True

    @abstractmethod
    def setup(self) -> Inventory:
        """Build and populate a fresh inventory."""
        pass

    @abstractmethod
    def check(self, inventory: Inventory) -> bool:
        """Return ``True`` if ``inventory`` is in the expected state."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return a human readable name for the scenario."""
        pass
