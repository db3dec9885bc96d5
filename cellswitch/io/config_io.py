from __future__ import annotations

import dataclasses
import pathlib

import yaml

from cellswitch.config.behavior_config import BehaviorConfig
from cellswitch.config.simulation_config import SimulationConfig


def _known_fields(cls) -> set[str]:
    return {f.name for f in dataclasses.fields(cls)}


def _check_keys(raw: dict, cls, section: str) -> None:
    unknown = set(raw) - _known_fields(cls)
    if unknown:
        raise ValueError(f"Unknown keys in {section} config: {sorted(unknown)}")


def load_simulation_config(path: str | pathlib.Path) -> SimulationConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Simulation config must be a mapping, got {type(raw).__name__}")

    behavior_raw = raw.pop("behavior", None) or {}
    if not isinstance(behavior_raw, dict):
        raise ValueError("behavior section must be a mapping")
    _check_keys(behavior_raw, BehaviorConfig, "behavior")
    _check_keys(raw, SimulationConfig, "simulation")

    if isinstance(raw.get("initial_position"), list):
        raw["initial_position"] = tuple(raw["initial_position"])
    return SimulationConfig(behavior=BehaviorConfig(**behavior_raw), **raw)
