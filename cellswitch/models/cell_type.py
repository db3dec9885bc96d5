from __future__ import annotations

from enum import IntEnum
from typing import Optional


class CellType(IntEnum):
    PRECURSOR = 1
    DIFFERENTIATED = 2


def resolve_cell_type(code: int) -> Optional[CellType]:
    """Return the known cell type for ``code``, or None if it has no behaviour."""
    try:
        return CellType(int(code))
    except ValueError:
        return None
