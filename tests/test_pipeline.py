import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest
import yaml
from numpy.testing import assert_array_equal

from floatdsp.core.config import ConfigError
from floatdsp.core.pipeline import PipelineError, run_pipeline


def _dataset(tmp_path: Path) -> Path:
    p = tmp_path / "input.csv"
    pd.DataFrame({"a": [2.0, 1.0, 30.0, 50.0, 44.0], "b": [1.0, 1.0, 1.0, 1.0, 1.0]}).to_csv(p, index=False)
    return p


def _config(tmp_path: Path, data) -> Path:
    p = tmp_path / "config.yaml"
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    return p


def test_pipeline_applies_steps_in_order(tmp_path: Path):
    cfg = _config(
        tmp_path,
        {
            "steps": [{"op": "median_filter", "width": 3}, {"op": "add", "with": ["b"]}],
            "reductions": ["min_max", "average", "extrema"],
        },
    )
    out = tmp_path / "out"
    result = run_pipeline(_dataset(tmp_path), out, config_path=cfg)

    assert_array_equal(result.series, [3, 31, 45])
    assert [(r.op, r.length_in, r.length_out) for r in result.steps] == [
        ("median_filter", 5, 3),
        ("add", 3, 3),
    ]
    assert result.reductions["min_max"] == {"min_index": 0, "min_value": 3.0, "max_index": 2, "max_value": 45.0}
    assert result.reductions["average"] == pytest.approx(79 / 3)

    assert (out / "series.csv").exists()
    assert (out / "config_resolved.yaml").exists()
    summary = json.loads((out / "summary.json").read_text(encoding="utf-8"))
    assert summary["steps"][1]["params"] == {"with": ["b"]}
    assert summary["metadata"]["length_in"] == 5
    assert summary["metadata"]["length_out"] == 3
    assert summary["metadata"]["precision"] == "float64"
    assert len(summary["metadata"]["input_sha256"]) == 64
    assert not (out / "series.png").exists()


def test_pipeline_without_steps_reports_reductions(tmp_path: Path):
    result = run_pipeline(_dataset(tmp_path), tmp_path / "out")
    assert_array_equal(result.series, [2, 1, 30, 50, 44])
    assert result.reductions["min_max"]["min_index"] == 1


def test_pipeline_single_precision_and_column_override(tmp_path: Path):
    result = run_pipeline(
        _dataset(tmp_path),
        tmp_path / "out",
        overrides={"precision": "float32", "input": {"column": "b"}, "steps": [{"op": "derivative"}]},
    )
    assert result.series.dtype == np.float32
    assert_array_equal(result.series, [0, 0, 0, 0])


def test_pipeline_empty_reduction_sentinels_serialise(tmp_path: Path):
    result = run_pipeline(
        _dataset(tmp_path),
        tmp_path / "out",
        overrides={"steps": [{"op": "every_nth", "n": 0}], "reductions": ["min_max", "extrema", "average"]},
    )
    assert result.series.size == 0
    assert result.reductions["min_max"]["min_index"] == -1
    assert result.reductions["min_max"]["min_value"] == float("inf")
    assert result.reductions["extrema"] is None
    assert result.reductions["average"] == 0.0


def test_pipeline_writes_figure(tmp_path: Path):
    out = tmp_path / "out"
    result = run_pipeline(
        _dataset(tmp_path), out, overrides={"steps": [{"op": "average_filter", "width": 2}]}, plot=True
    )
    assert (out / "series.png").exists()
    assert result.metadata["figure"].endswith("series.png")


def test_pipeline_unknown_combine_column(tmp_path: Path):
    with pytest.raises(PipelineError):
        run_pipeline(_dataset(tmp_path), tmp_path / "out", overrides={"steps": [{"op": "sub", "with": ["zz"]}]})


def test_pipeline_rejects_invalid_config(tmp_path: Path):
    with pytest.raises(ConfigError):
        run_pipeline(_dataset(tmp_path), tmp_path / "out", overrides={"steps": [{"op": "repeat", "x": 1, "n": 2}]})
