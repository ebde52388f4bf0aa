"""Demo scenarios exercising the inventory end to end."""

from __future__ import annotations

from typing import Dict, List
import math

from .base_scenario import BaseScenario
from ..actions.builtin import ConditionKind, ConditionalTreat, Cut, Dry, Treat
from ..core.inventory import Inventory
from ..core.item import Item


class AddSingleItemScenario(BaseScenario):
    """One oak board with a cut step is stored and retrievable."""

    process = False

    def get_name(self) -> str:
        return "AddSingleItem"

    def setup(self) -> Inventory:
        inv = Inventory()
        inv.add_item(Item("Oak", 25.0, 12.5, False, [Cut(2.5)]))
        return inv

    def check(self, inventory: Inventory) -> bool:
        items = inventory.items()
        return len(items) == 1 and items[0].species == "Oak"


class MultipleItemsCountScenario(BaseScenario):
    process = False

    def get_name(self) -> str:
        return "MultipleItemsCount"

    def setup(self) -> Inventory:
        inv = Inventory()
        inv.add_item(Item("Pine", 20.0, 10.0, False, []))
        inv.add_item(Item("Maple", 30.0, 8.0, True, []))
        return inv

    def check(self, inventory: Inventory) -> bool:
        return len(inventory.items()) == 2


class ProcessDryingScenario(BaseScenario):
    """Drying lowers teak moisture from 15.0."""

    initial_moisture = 15.0

    def get_name(self) -> str:
        return "ProcessDrying"

    def setup(self) -> Inventory:
        inv = Inventory()
        inv.add_item(Item("Teak", 15.0, self.initial_moisture, False, [Dry()]))
        return inv

    def check(self, inventory: Inventory) -> bool:
        moisture = inventory.items()[0].moisture_content
        return moisture < self.initial_moisture and math.isclose(moisture, 12.0)


class ConditionalTreatmentScenario(BaseScenario):
    """Walnut at 12% moisture is treated by a MoistureAbove 10 gate."""

    def get_name(self) -> str:
        return "ConditionalTreatment"

    def setup(self) -> Inventory:
        inv = Inventory()
        gate = ConditionalTreat(Treat(), ConditionKind.MOISTURE_ABOVE, 10.0)
        inv.add_item(Item("Walnut", 18.0, 12.0, False, [gate]))
        return inv

    def check(self, inventory: Inventory) -> bool:
        return inventory.items()[0].is_treated


class ThicknessUnchangedScenario(BaseScenario):
    initial_thickness = 20.0
    initial_moisture = 14.0

    def get_name(self) -> str:
        return "ThicknessUnchangedAfterProcessing"

    def setup(self) -> Inventory:
        inv = Inventory()
        inv.add_item(Item("Mahogany", self.initial_thickness, self.initial_moisture, False, [Dry(), Treat()]))
        return inv

    def check(self, inventory: Inventory) -> bool:
        item = inventory.items()[0]
        return (
            item.thickness == self.initial_thickness
            and item.is_treated
            and item.moisture_content < self.initial_moisture
        )


class UntreatedBelowThresholdScenario(BaseScenario):
    """Cedar at 12% moisture stays untreated behind a MoistureAbove 15 gate."""

    def get_name(self) -> str:
        return "UntreatedWhenMoistureBelowThreshold"

    def setup(self) -> Inventory:
        inv = Inventory()
        gate = ConditionalTreat(Treat(), ConditionKind.MOISTURE_ABOVE, 15.0)
        inv.add_item(Item("Cedar", 22.0, 12.0, False, [gate]))
        return inv

    def check(self, inventory: Inventory) -> bool:
        return not inventory.items()[0].is_treated


SCENARIOS: List[BaseScenario] = [
    AddSingleItemScenario(),
    MultipleItemsCountScenario(),
    ProcessDryingScenario(),
    ConditionalTreatmentScenario(),
    ThicknessUnchangedScenario(),
    UntreatedBelowThresholdScenario(),
]


def scenarios_by_name() -> Dict[str, BaseScenario]:
    """Return the registered scenarios keyed by :meth:`BaseScenario.get_name`."""
    return {scenario.get_name(): scenario for scenario in SCENARIOS}


__all__ = [
    "AddSingleItemScenario",
    "MultipleItemsCountScenario",
    "ProcessDryingScenario",
    "ConditionalTreatmentScenario",
    "ThicknessUnchangedScenario",
    "UntreatedBelowThresholdScenario",
    "SCENARIOS",
    "scenarios_by_name",
]
