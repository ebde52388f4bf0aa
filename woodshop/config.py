"""Simple configuration loader for woodshop."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class LoggingConfig:
    """Configuration values for the logging section."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class ScenarioConfig:
    """Which demo scenarios ``woodshop.main`` should run."""

    # Empty means every registered scenario.
    enabled: List[str] = field(default_factory=list)


@dataclass
class Config:
    """Top level configuration dataclass."""

    logging: LoggingConfig
    scenarios: ScenarioConfig


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return ``data[name]`` if it is a mapping, else an empty dict."""

    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _parse_config(data: Any) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    if not isinstance(data, dict):
        data = {}

    logging_data = _section(data, "logging")
    module_levels = logging_data.get("module_levels")
    if not isinstance(module_levels, dict):
        module_levels = {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={str(name): str(level) for name, level in module_levels.items()},
    )

    enabled = _section(data, "scenarios").get("enabled")
    if not isinstance(enabled, list):
        enabled = []
    scenarios = ScenarioConfig(enabled=[str(name) for name in enabled])

    return Config(logging=logging_cfg, scenarios=scenarios)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "ScenarioConfig",
    "load_config",
]
