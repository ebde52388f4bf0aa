"""scenarios package."""

from .base_scenario import BaseScenario
from .wood_scenarios import SCENARIOS, scenarios_by_name

__all__ = ["BaseScenario", "SCENARIOS", "scenarios_by_name"]
