from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BehaviorConfig:
    decay_factor: float = 0.99  # Fraction of substance kept per step
    growth_increment: float = 0.2  # Diameter added per step below max_diameter
    substance_threshold: float = 75.0  # Switch to differentiated below this
    default_new_diameter: float = 6.0  # Diameter given to daughters
    differentiated_color: int = 1

    def __post_init__(self) -> None:
        if not 0 < self.decay_factor <= 1:
            raise ValueError(f"decay_factor must be in (0, 1], got {self.decay_factor}")
        if self.growth_increment < 0:
            raise ValueError(f"growth_increment must be non-negative, got {self.growth_increment}")
        if self.substance_threshold < 0:
            raise ValueError(f"substance_threshold must be non-negative, got {self.substance_threshold}")
        if self.default_new_diameter <= 0:
            raise ValueError(f"default_new_diameter must be positive, got {self.default_new_diameter}")
