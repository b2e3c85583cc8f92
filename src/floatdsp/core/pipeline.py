"""Config-driven chaining of operations over a series table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from floatdsp.core.config import STEP_RESERVED_KEYS, dump_yaml, resolve_config
from floatdsp.core.precision import as_real_array, resolve_dtype
from floatdsp.core.registry import get_operation
from floatdsp.core.types import MinMax, PipelineResult, StepRecord
from floatdsp.core.versioning import dependency_versions, invocation_string
from floatdsp.data.io import SeriesIOError, load_table, select_series, write_json, write_series
from floatdsp.utils.hash import config_sha256, sha256_of_file
from floatdsp.utils.time import utc_now_iso

logger = logging.getLogger(__name__)


class PipelineError(RuntimeError):
    """Raised when the pipeline cannot complete."""


def run_pipeline(
    input_path: str | Path,
    out_dir: str | Path,
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    plot: bool | None = None,
    argv: list[str] | None = None,
) -> PipelineResult:
    input_file = Path(input_path)
    out_root = Path(out_dir)
    out_root.mkdir(parents=True, exist_ok=True)

    cfg = resolve_config(config_path=config_path, overrides=overrides)
    dtype = resolve_dtype(cfg["precision"])
    table = load_table(input_file)
    raw = as_real_array(select_series(table, cfg["input"]["column"]), dtype)
    logger.info("Loaded %d samples from %s as %s", raw.size, input_file, dtype.name)

    series, records = apply_steps(raw, cfg["steps"], table, dtype)
    reductions = compute_reductions(series, cfg["reductions"], dtype)

    write_series(series, out_root / "series.csv")
    dump_yaml(cfg, out_root / "config_resolved.yaml")

    metadata: dict[str, Any] = {
        "input_path": str(input_file),
        "input_sha256": sha256_of_file(input_file),
        "config_sha256": config_sha256(cfg),
        "precision": dtype.name,
        "length_in": int(raw.size),
        "length_out": int(series.size),
        "timestamp_utc": utc_now_iso(),
        "versions": dependency_versions(),
        "invocation": invocation_string(argv or []),
    }

    do_plot = cfg["plot"]["enabled"] if plot is None else plot
    if do_plot:
        from floatdsp.viz.plots import plot_series

        figure = plot_series(raw, series, out_root / "series.png", dpi=int(cfg["plot"]["dpi"]))
        metadata["figure"] = str(figure)
        logger.info("Wrote figure to %s", figure)

    write_json(
        {
            "reductions": reductions,
            "steps": [_record_to_dict(r) for r in records],
            "metadata": metadata,
        },
        out_root / "summary.json",
    )
    logger.info("Wrote %d samples to %s", series.size, out_root / "series.csv")

    return PipelineResult(series=series, reductions=reductions, steps=records, metadata=metadata)


def apply_steps(
    series: np.ndarray,
    steps: list[dict[str, Any]],
    table: pd.DataFrame,
    dtype: np.dtype,
) -> tuple[np.ndarray, list[StepRecord]]:
    """Apply configured steps in order; returns the final series and a step log."""

    current = series
    records: list[StepRecord] = []
    for index, step in enumerate(steps):
        spec = get_operation(str(step["op"]))
        params = {k: v for k, v in step.items() if k not in STEP_RESERVED_KEYS}
        length_in = int(current.size)
        if spec.kind == "combine":
            others = []
            for column in step["with"]:
                try:
                    others.append(select_series(table, str(column)))
                except SeriesIOError as exc:
                    raise PipelineError(f"steps[{index}] ({spec.name}): {exc}") from exc
            current = spec.func(current, *others, dtype=dtype)
            params["with"] = [str(c) for c in step["with"]]
        else:
            current = spec.func(current, **params, dtype=dtype)
        logger.debug("Step %d %s %s: %d -> %d samples", index, spec.name, params, length_in, current.size)
        records.append(StepRecord(op=spec.name, params=params, length_in=length_in, length_out=int(current.size)))
    return current, records


def compute_reductions(series: np.ndarray, names: list[str], dtype: np.dtype) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name in names:
        spec = get_operation(str(name))
        out[spec.name] = _to_builtin(spec.func(series, dtype=dtype))
    return out


def _to_builtin(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, MinMax):
        return {k: _to_builtin(v) for k, v in value._asdict().items()}
    if isinstance(value, (int, np.integer)):
        return int(value)
    return float(value)


def _record_to_dict(record: StepRecord) -> dict[str, Any]:
    return {
        "op": record.op,
        "params": record.params,
        "length_in": record.length_in,
        "length_out": record.length_out,
    }
