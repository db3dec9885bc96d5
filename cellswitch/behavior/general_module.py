"""Per-step behaviour of a cell, selected by its functional type.

Precursor cells lose 1% of their intracellular substance each step, grow
until they reach their maximum diameter and divide once they have. When the
substance drops below the threshold they switch to the differentiated type.
Differentiated cells currently do nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Optional

from cellswitch.config.behavior_config import BehaviorConfig
from cellswitch.models.cell import Cell
from cellswitch.models.cell_type import CellType, resolve_cell_type

if TYPE_CHECKING:
    from cellswitch.lineage.population import Population

logger = logging.getLogger(__name__)


class GeneralModule:
    """Stateless behaviour shared by every cell; all state lives on the cell."""

    def __init__(self, config: BehaviorConfig | None = None) -> None:
        self.config = config if config is not None else BehaviorConfig()
        self._handlers: Dict[CellType, Callable[[Cell, "Population"], Optional[Cell]]] = {
            CellType.PRECURSOR: self._precursor_step,
            CellType.DIFFERENTIATED: self._differentiated_step,
        }

    def run(self, cell: Cell, population: "Population") -> Optional[Cell]:
        """Run one step for ``cell``; return the daughter if it divided."""
        cell_type = resolve_cell_type(cell.get_type())
        if cell_type is None:
            logger.warning("no behaviour defined for cell of type: %s", cell.get_type())
            return None
        return self._handlers[cell_type](cell, population)

    def _precursor_step(self, cell: Cell, population: "Population") -> Optional[Cell]:
        # The threshold check below must see the post-decay value.
        substance = cell.get_substance_quantity() * self.config.decay_factor
        cell.set_substance_quantity(substance)

        daughter = self._grow_or_divide(cell, population)

        if substance < self.config.substance_threshold:
            cell.set_type(CellType.DIFFERENTIATED)
            cell.set_color(self.config.differentiated_color)
            cell.set_substance_quantity(0.0)
            logger.info("cell %s switched to type %d", cell.cell_id, CellType.DIFFERENTIATED)
        return daughter

    def _differentiated_step(self, cell: Cell, population: "Population") -> Optional[Cell]:
        return None

    def _grow_or_divide(self, cell: Cell, population: "Population") -> Optional[Cell]:
        if cell.get_diameter() < cell.get_max_diameter():
            cell.set_diameter(cell.get_diameter() + self.config.growth_increment)
            return None
        # Mother keeps its diameter, so it divides again next step.
        return population.divide(cell, diameter=self.config.default_new_diameter)
