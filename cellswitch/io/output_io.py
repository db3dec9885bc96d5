from __future__ import annotations

import csv
import pathlib
from typing import Mapping, Sequence

HISTORY_FIELDS = [
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


def save_history_csv(rows: Sequence[Mapping[str, object]], path: str | pathlib.Path) -> None:
    if not rows:
        raise ValueError("No history rows to write")

    path_obj = pathlib.Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)

    with open(path_obj, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=HISTORY_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def load_history_csv(path: str | pathlib.Path) -> list[dict[str, object]]:
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = set(HISTORY_FIELDS) - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Missing columns in history CSV: {sorted(missing)}")
        rows = [dict(row) for row in reader]
    if not rows:
        raise ValueError(f"No history rows found in {path}")
    return rows
