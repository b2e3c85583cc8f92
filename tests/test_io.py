from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_array_equal

from floatdsp.data.io import SeriesIOError, load_table, select_series, write_series


def test_load_csv_and_select_columns(tmp_path: Path):
    p = tmp_path / "input.csv"
    pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0]}).to_csv(p, index=False)
    table = load_table(p)
    assert_array_equal(select_series(table), [1, 2, 3])
    assert_array_equal(select_series(table, "b"), [4, 5, 6])


def test_unknown_column_lists_available(tmp_path: Path):
    p = tmp_path / "input.csv"
    pd.DataFrame({"a": [1.0]}).to_csv(p, index=False)
    with pytest.raises(SeriesIOError) as exc:
        select_series(load_table(p), "zz")
    assert "Available columns: a" in str(exc.value)


def test_non_numeric_cells_become_nan(tmp_path: Path):
    p = tmp_path / "input.csv"
    p.write_text("x\n1.5\noops\n4\n", encoding="utf-8")
    values = select_series(load_table(p))
    assert values[0] == 1.5
    assert np.isnan(values[1])
    assert values[2] == 4.0


def test_load_npy(tmp_path: Path):
    p = tmp_path / "input.npy"
    np.save(p, np.array([3.0, 1.0]))
    assert_array_equal(select_series(load_table(p), "value"), [3, 1])


def test_load_errors(tmp_path: Path):
    with pytest.raises(SeriesIOError):
        load_table(tmp_path / "missing.csv")
    bad = tmp_path / "input.parquet"
    bad.write_bytes(b"")
    with pytest.raises(SeriesIOError):
        load_table(bad)
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(SeriesIOError):
        load_table(empty)


def test_write_series_round_trip(tmp_path: Path):
    out = write_series(np.array([1.0, 2.5]), tmp_path / "nested" / "series.csv")
    assert_array_equal(select_series(load_table(out), "value"), [1.0, 2.5])
