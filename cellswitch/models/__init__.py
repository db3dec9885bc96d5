"""Model definitions for cells and their functional types."""

from .cell import Cell
from .cell_type import CellType, resolve_cell_type

__all__ = ["Cell", "CellType", "resolve_cell_type"]
