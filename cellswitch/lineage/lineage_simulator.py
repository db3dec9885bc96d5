from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from cellswitch.behavior.general_module import GeneralModule
from cellswitch.config.simulation_config import SimulationConfig
from cellswitch.lineage.population import Population
from cellswitch.models.cell import Cell

logger = logging.getLogger(__name__)


class LineageSimulator:
    def __init__(self, sim_config: SimulationConfig, behavior: GeneralModule | None = None) -> None:
        self.sim_config = sim_config
        self.behavior = behavior if behavior is not None else GeneralModule(sim_config.behavior)
        self.population = Population()
        self.steps_done = 0
        self._init_cells()

    def _make_cell(self, cell_id: int) -> Cell:
        cfg = self.sim_config
        return Cell(
            cell_id=cell_id,
            parent_id=None,
            generation=0,
            position=np.array(cfg.initial_position, dtype=np.float64),
            diameter=cfg.initial_diameter,
            max_diameter=cfg.initial_max_diameter,
            cell_type=cfg.initial_cell_type,
            color=cfg.initial_color,
            substance_quantity=cfg.initial_substance_quantity,
            behavior=self.behavior,
        )

    def _init_cells(self) -> None:
        for _ in range(self.sim_config.initial_cell_count):
            self.population.add(self._make_cell(self.population.new_cell_id()))

    def _make_rows(self) -> List[dict]:
        rows = []
        for cell in self.population:
            row = {"step": self.steps_done}
            row.update(cell.snapshot())
            rows.append(row)
        return rows

    def step(self) -> int:
        """Run every live cell's behaviour once; return the number of new cells."""
        for cell in self.population:
            if cell.behavior is not None:
                cell.behavior.run(cell, self.population)
        admitted = self.population.commit()
        self.steps_done += 1
        logger.debug("step %d: %d cells (%d new)", self.steps_done, len(self.population), admitted)
        return admitted

    def run(self, steps: Optional[int] = None) -> List[dict]:
        n_steps = self.sim_config.steps if steps is None else int(steps)
        if n_steps <= 0:
            raise ValueError("steps must be positive")

        history: List[dict] = []
        if self.steps_done == 0:
            history.extend(self._make_rows())
        recorded = False
        for _ in range(n_steps):
            self.step()
            recorded = self.steps_done % self.sim_config.record_interval == 0
            if recorded:
                history.extend(self._make_rows())
        # The final state is always part of the history.
        if not recorded:
            history.extend(self._make_rows())
        logger.info("Simulation completed: %d steps, %d cells", self.steps_done, len(self.population))
        return history
