from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np


def _check_non_negative(name: str, value: float) -> float:
    value = float(value)
    # Also catches NaN.
    if not value >= 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


@dataclass
class Cell:
    cell_id: int
    parent_id: Optional[int]
    generation: int
    position: np.ndarray = field(repr=False, compare=False)
    diameter: float
    max_diameter: float
    cell_type: int
    color: int
    substance_quantity: float  # Intracellular substance quantity
    behavior: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=np.float64)
        if self.position.shape != (3,):
            raise ValueError(f"position must have shape (3,), got {self.position.shape}")
        self.diameter = _check_non_negative("diameter", self.diameter)
        self.max_diameter = _check_non_negative("max_diameter", self.max_diameter)
        self.substance_quantity = _check_non_negative("substance_quantity", self.substance_quantity)
        self.cell_type = int(self.cell_type)
        self.color = int(self.color)

    def get_type(self) -> int:
        return self.cell_type

    def set_type(self, cell_type: int) -> None:
        self.cell_type = int(cell_type)

    def get_color(self) -> int:
        return self.color

    def set_color(self, color: int) -> None:
        self.color = int(color)

    def get_substance_quantity(self) -> float:
        return self.substance_quantity

    def set_substance_quantity(self, substance_quantity: float) -> None:
        self.substance_quantity = _check_non_negative("substance_quantity", substance_quantity)

    def get_diameter(self) -> float:
        return self.diameter

    def set_diameter(self, diameter: float) -> None:
        self.diameter = _check_non_negative("diameter", diameter)

    def get_max_diameter(self) -> float:
        return self.max_diameter

    def set_max_diameter(self, max_diameter: float) -> None:
        self.max_diameter = _check_non_negative("max_diameter", max_diameter)

    def divide(self, cell_id: int, diameter: float) -> "Cell":
        """Create a daughter cell; the mother is left untouched.

        The daughter copies type, color, max_diameter and the bound behaviour.
        Its diameter is the given default rather than the mother's, and it
        starts without intracellular substance.
        """
        return Cell(
            cell_id=cell_id,
            parent_id=self.cell_id,
            generation=self.generation + 1,
            position=self.position.copy(),
            diameter=diameter,
            max_diameter=self.max_diameter,
            cell_type=self.cell_type,
            color=self.color,
            substance_quantity=0.0,
            behavior=self.behavior,
        )

    def snapshot(self) -> dict:
        """Return lightweight snapshot dictionary for serialization."""
        x, y, z = (float(v) for v in self.position)
        return {
            "cell_id": self.cell_id,
            "parent_id": self.parent_id,
            "generation": self.generation,
            "cell_type": self.cell_type,
            "color": self.color,
            "diameter": self.diameter,
            "max_diameter": self.max_diameter,
            "substance_quantity": self.substance_quantity,
            "x": x,
            "y": y,
            "z": z,
        }
