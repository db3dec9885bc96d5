"""Input/output helpers for configs and run histories."""

from .config_io import load_simulation_config
from .output_io import HISTORY_FIELDS, load_history_csv, save_history_csv

__all__ = [
    "load_simulation_config",
    "save_history_csv",
    "load_history_csv",
    "HISTORY_FIELDS",
]
