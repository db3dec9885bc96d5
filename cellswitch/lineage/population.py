"""Population store for the cells of one simulation.

Cells created by division during a step are queued and only join the live
population on ``commit()``, so a step never visits its own daughters.
"""

from __future__ import annotations

import threading
from typing import Iterator, List, Optional

from cellswitch.models.cell import Cell


class Population:
    def __init__(self) -> None:
        self._cells: List[Cell] = []
        self._pending: List[Cell] = []
        self._by_id: dict[int, Cell] = {}
        self._next_cell_id = 0
        self._lock = threading.Lock()

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells)

    @property
    def pending(self) -> List[Cell]:
        return list(self._pending)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells))

    def get(self, cell_id: int) -> Optional[Cell]:
        return self._by_id.get(cell_id)

    def new_cell_id(self) -> int:
        with self._lock:
            return self._allocate_id()

    def _allocate_id(self) -> int:
        cell_id = self._next_cell_id
        self._next_cell_id += 1
        return cell_id

    def add(self, cell: Cell) -> None:
        """Admit a seeded cell to the live population right away."""
        with self._lock:
            if cell.cell_id in self._by_id:
                raise ValueError(f"cell_id {cell.cell_id} already in population")
            self._cells.append(cell)
            self._by_id[cell.cell_id] = cell
            self._next_cell_id = max(self._next_cell_id, cell.cell_id + 1)

    def divide(self, mother: Cell, diameter: float) -> Cell:
        """Create a daughter of ``mother`` and queue it for the next step."""
        with self._lock:
            daughter = mother.divide(self._allocate_id(), diameter=diameter)
            self._pending.append(daughter)
            self._by_id[daughter.cell_id] = daughter
        return daughter

    def commit(self) -> int:
        with self._lock:
            admitted = len(self._pending)
            self._cells.extend(self._pending)
            self._pending = []
        return admitted
