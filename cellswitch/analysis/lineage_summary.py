from __future__ import annotations

import math
from typing import Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from cellswitch.config.behavior_config import BehaviorConfig
from cellswitch.models.cell_type import CellType

_NUMERIC_COLUMNS = [
    "step",
    "cell_id",
    "parent_id",
    "generation",
    "cell_type",
    "color",
    "diameter",
    "max_diameter",
    "substance_quantity",
    "x",
    "y",
    "z",
]
_INT_COLUMNS = ["step", "cell_id", "generation", "cell_type", "color"]


def history_frame(rows: Iterable[Mapping[str, object]]) -> pd.DataFrame:
    """Build a typed DataFrame from history rows (in memory or loaded from CSV)."""
    df = pd.DataFrame(list(rows))
    if df.empty:
        raise ValueError("No history rows given")
    for col in _NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    for col in _INT_COLUMNS:
        if col in df.columns:
            df[col] = df[col].astype(np.int64)
    # Seeded cells have no parent.
    if "parent_id" in df.columns:
        df["parent_id"] = df["parent_id"].astype("Int64")
    return df


def type_counts(rows: Iterable[Mapping[str, object]]) -> pd.DataFrame:
    """Number of cells of each type code per recorded step."""
    df = history_frame(rows)
    counts = df.groupby(["step", "cell_type"]).size().unstack(fill_value=0)
    counts.columns.name = None
    return counts.astype(np.int64)


def switch_steps(rows: Iterable[Mapping[str, object]]) -> dict[int, int]:
    """First recorded step at which each cell is differentiated."""
    df = history_frame(rows)
    diff = df[df["cell_type"] == int(CellType.DIFFERENTIATED)]
    firsts = diff.groupby("cell_id")["step"].min()
    return {int(k): int(v) for k, v in firsts.items()}


def division_counts(rows: Iterable[Mapping[str, object]]) -> dict[int, int]:
    """Number of daughters recorded for each mother cell."""
    df = history_frame(rows)
    daughters = df.dropna(subset=["parent_id"]).drop_duplicates("cell_id")
    counts = daughters.groupby("parent_id")["cell_id"].count()
    return {int(k): int(v) for k, v in counts.items()}


def expected_switch_step(initial_substance: float, config: BehaviorConfig) -> Optional[int]:
    """Step at which a precursor seeded with ``initial_substance`` switches type.

    Returns None when the substance never drops below the threshold.
    """
    s0 = float(initial_substance)
    decay = config.decay_factor
    threshold = config.substance_threshold
    if s0 * decay < threshold:
        return 1
    if decay >= 1.0 or s0 <= 0.0 or threshold <= 0.0:
        return None
    n = max(1, int(math.floor(math.log(threshold / s0) / math.log(decay))) + 1)
    while s0 * decay**n >= threshold:
        n += 1
    while n > 1 and s0 * decay ** (n - 1) < threshold:
        n -= 1
    return n


def expected_first_division_step(
    initial_diameter: float,
    max_diameter: float,
    config: BehaviorConfig,
) -> Optional[int]:
    """Step at which a precursor first divides.

    Repeats the same float additions as the behaviour module, so rounding in
    the accumulated diameter can delay division by a step.
    """
    diameter = float(initial_diameter)
    max_diameter = float(max_diameter)
    if diameter >= max_diameter:
        return 1
    if config.growth_increment <= 0:
        return None
    step = 1
    while diameter < max_diameter:
        diameter += config.growth_increment
        step += 1
    return step
