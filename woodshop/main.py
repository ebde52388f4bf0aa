"""Run the demo inventory scenarios and report pass/fail."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple
import logging
import sys

from .config import CONFIG, Config
from .logging_config import setup_logging
from .scenarios.base_scenario import BaseScenario
from .scenarios.wood_scenarios import SCENARIOS, scenarios_by_name

logger = logging.getLogger(__name__)


def run_scenario(scenario: BaseScenario) -> bool:
    """Set up, optionally process, and check a single scenario."""

    name = scenario.get_name()
    inventory = scenario.setup()
    if scenario.process:
        inventory.process_all()
    passed = bool(scenario.check(inventory))
    print(f"[{'PASS' if passed else 'FAIL'}] WoodTest.{name}")
    if passed:
        logger.debug("Scenario %s passed", name)
    else:
        logger.warning("Scenario %s failed; items: %s", name, list(inventory.items()))
    return passed


def run_scenarios(
    scenarios: Iterable[BaseScenario] = SCENARIOS,
) -> List[Tuple[str, bool]]:
    """Run ``scenarios`` in order and return ``(name, passed)`` pairs."""

    return [(scenario.get_name(), run_scenario(scenario)) for scenario in scenarios]


def select_scenarios(names: Sequence[str]) -> List[BaseScenario]:
    """Return the scenarios called ``names``, or all of them when empty.

    Raises ``KeyError`` naming the first unknown scenario.
    """
    if not names:
        return list(SCENARIOS)
    registry = scenarios_by_name()
    selected: List[BaseScenario] = []
    for name in names:
        if name not in registry:
            raise KeyError(name)
        selected.append(registry[name])
    return selected


def main(argv: Optional[Sequence[str]] = None, config: Config = CONFIG) -> int:
    """Entry point. Scenario names may be passed on the command line."""

    setup_logging(config)
    names = list(sys.argv[1:] if argv is None else argv) or config.scenarios.enabled
    try:
        scenarios = select_scenarios(names)
    except KeyError as exc:
        logger.error(
            "Unknown scenario %s. Available: %s",
            exc,
            ", ".join(scenarios_by_name()),
        )
        return 2

    results = run_scenarios(scenarios)
    failed = [name for name, passed in results if not passed]
    logger.info("%s/%s scenarios passed", len(results) - len(failed), len(results))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
