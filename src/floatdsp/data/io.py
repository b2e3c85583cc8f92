"""I/O helpers for series tables and run outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

TABLE_SUFFIXES = {".csv", ".txt"}


class SeriesIOError(FileNotFoundError):
    """Raised when an input table or column cannot be read."""


def load_table(path: str | Path) -> pd.DataFrame:
    """Read a table of series, one column per series.

    ``.npy`` files hold a single 1-D array and become a one-column table named
    ``value``.
    """

    p = Path(path)
    if not p.exists():
        raise SeriesIOError(f"Input file does not exist: {p}")
    suffix = p.suffix.lower()
    if suffix == ".npy":
        arr = np.load(p, allow_pickle=False)
        return pd.DataFrame({"value": np.asarray(arr, dtype=float).reshape(-1)})
    if suffix not in TABLE_SUFFIXES:
        raise SeriesIOError(f"Unsupported input format '{suffix}'. Supported: .csv|.txt|.npy")
    try:
        table = pd.read_csv(p)
    except pd.errors.EmptyDataError as exc:
        raise SeriesIOError(f"Input table is empty: {p}") from exc
    return table


def select_series(table: pd.DataFrame, column: str | None = None) -> np.ndarray:
    name = table.columns[0] if column is None else column
    if name not in table.columns:
        available = ", ".join(str(c) for c in table.columns)
        raise SeriesIOError(f"Column '{name}' not found. Available columns: {available}")
    return pd.to_numeric(table[name], errors="coerce").to_numpy(dtype=float)


def write_series(values: np.ndarray, path: str | Path, column: str = "value") -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame({column: np.asarray(values)}).to_csv(p, index=False)
    return p


def write_json(data: dict[str, Any], path: str | Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
