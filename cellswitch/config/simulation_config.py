from __future__ import annotations

from dataclasses import dataclass, field

from cellswitch.config.behavior_config import BehaviorConfig


@dataclass(frozen=True)
class SimulationConfig:
    steps: int = 500
    initial_substance_quantity: float = 100.0
    initial_diameter: float = 6.0
    initial_max_diameter: float = 10.0
    initial_cell_type: int = 1
    initial_color: int = 0
    initial_position: tuple[float, float, float] = (0.0, 0.0, 10.0)
    initial_cell_count: int = 1
    record_interval: int = 1  # Record history every N steps
    behavior: BehaviorConfig = field(default_factory=BehaviorConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_position", tuple(float(x) for x in self.initial_position))
        if self.steps <= 0:
            raise ValueError("steps must be positive")
        if self.initial_substance_quantity < 0:
            raise ValueError("initial_substance_quantity must be non-negative")
        if self.initial_diameter < 0:
            raise ValueError("initial_diameter must be non-negative")
        if self.initial_max_diameter < 0:
            raise ValueError("initial_max_diameter must be non-negative")
        if len(self.initial_position) != 3:
            raise ValueError("initial_position must have exactly three coordinates")
        if self.initial_cell_count <= 0:
            raise ValueError("initial_cell_count must be positive")
        if self.record_interval <= 0:
            raise ValueError("record_interval must be positive")
        if not isinstance(self.behavior, BehaviorConfig):
            raise ValueError("behavior must be a BehaviorConfig")
