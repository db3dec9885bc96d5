from __future__ import annotations

import math

import pytest

from cellswitch.analysis.lineage_summary import (
    division_counts,
    expected_first_division_step,
    expected_switch_step,
    history_frame,
    switch_steps,
    type_counts,
)
from cellswitch.config.behavior_config import BehaviorConfig
from cellswitch.config.simulation_config import SimulationConfig
from cellswitch.lineage.lineage_simulator import LineageSimulator


def _history(steps: int = 60) -> list[dict]:
    return LineageSimulator(SimulationConfig(steps=steps)).run()


def test_expected_switch_step_default() -> None:
    expected = math.ceil(math.log(0.75) / math.log(0.99))
    assert expected_switch_step(100.0, BehaviorConfig()) == expected == 29


def test_expected_switch_step_edge_cases() -> None:
    cfg = BehaviorConfig()
    assert expected_switch_step(0.0, cfg) == 1
    assert expected_switch_step(70.0, cfg) == 1
    assert expected_switch_step(100.0, BehaviorConfig(decay_factor=1.0)) is None
    assert expected_switch_step(100.0, BehaviorConfig(substance_threshold=0.0)) is None


def test_expected_first_division_step() -> None:
    cfg = BehaviorConfig()
    # 6.0 plus twenty float additions of 0.2 stays just below 10.0.
    assert expected_first_division_step(6.0, 10.0, cfg) == 22
    assert expected_first_division_step(10.0, 10.0, cfg) == 1
    assert expected_first_division_step(6.0, 7.0, BehaviorConfig(growth_increment=0.5)) == 3
    assert expected_first_division_step(6.0, 10.0, BehaviorConfig(growth_increment=0.0)) is None


def test_expected_first_division_step_matches_simulation() -> None:
    rows = _history(40)
    first = min(r["step"] for r in rows if r["parent_id"] == 0)
    assert first == expected_first_division_step(6.0, 10.0, BehaviorConfig())


def test_history_frame_types() -> None:
    df = history_frame(_history(5))
    assert df["step"].dtype.kind == "i"
    assert df["cell_type"].dtype.kind == "i"
    assert df["parent_id"].isna().all()


def test_history_frame_rejects_empty() -> None:
    with pytest.raises(ValueError, match="No history rows"):
        history_frame([])


def test_type_counts_follow_the_switch() -> None:
    counts = type_counts(_history())
    assert counts.loc[0].to_dict() == {1: 1, 2: 0}
    # Only the seeded precursor exists before the first division.
    assert counts.loc[20].to_dict() == {1: 1, 2: 0}
    assert counts.loc[29, 2] >= 1
    assert counts.loc[60, 1] == 0
    assert counts.loc[60].sum() == counts.loc[30].sum()


def test_switch_and_division_summaries_agree() -> None:
    rows = _history()
    switched = switch_steps(rows)
    divisions = division_counts(rows)

    assert switched[0] == expected_switch_step(100.0, BehaviorConfig())
    assert len(switched) == 1 + divisions[0]
