"""Analysis helpers for simulated lineages."""

from .lineage_summary import (
    division_counts,
    expected_first_division_step,
    expected_switch_step,
    history_frame,
    switch_steps,
    type_counts,
)

__all__ = [
    "history_frame",
    "type_counts",
    "switch_steps",
    "division_counts",
    "expected_switch_step",
    "expected_first_division_step",
]
