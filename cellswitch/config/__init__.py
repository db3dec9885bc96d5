"""Configuration dataclasses for behaviour rules and simulation runs."""

from .behavior_config import BehaviorConfig
from .simulation_config import SimulationConfig

__all__ = ["BehaviorConfig", "SimulationConfig"]
