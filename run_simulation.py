from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Sequence

from cellswitch.analysis.lineage_summary import switch_steps
from cellswitch.config.simulation_config import SimulationConfig
from cellswitch.io.config_io import load_simulation_config
from cellswitch.io.output_io import save_history_csv
from cellswitch.lineage.lineage_simulator import LineageSimulator


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the precursor/differentiated cell switching simulation.")
    parser.add_argument("--config", default=None, help="Path to simulation YAML config (default: built-in values)")
    parser.add_argument("--out", default=None, help="Output CSV path for the per-step history")
    parser.add_argument("--steps", type=int, default=None, help="Override the number of simulation steps")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def maybe_override_steps(config: SimulationConfig, steps: int | None) -> SimulationConfig:
    if steps is None:
        return config
    if steps <= 0:
        raise ValueError("steps override must be positive")
    return dataclasses.replace(config, steps=steps)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s:%(name)s:%(message)s")

    sim_config = load_simulation_config(args.config) if args.config else SimulationConfig()
    sim_config = maybe_override_steps(sim_config, args.steps)

    simulator = LineageSimulator(sim_config)
    history = simulator.run()
    if args.out is not None:
        save_history_csv(history, args.out)
        print(f"Wrote {len(history)} history rows to {args.out}")

    switched = switch_steps(history)
    print(
        f"Simulation completed successfully! {len(simulator.population)} cells after "
        f"{simulator.steps_done} steps, {len(switched)} differentiated."
    )


if __name__ == "__main__":
    main()
