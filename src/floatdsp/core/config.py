"""Configuration loading and resolution."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from floatdsp.core.precision import resolve_dtype
from floatdsp.core.registry import RegistryError, get_operation
from floatdsp.ops import register_builtin_operations


class ConfigError(ValueError):
    """Raised when configuration is invalid."""


DEFAULT_CONFIG: dict[str, Any] = {
    "precision": "float64",
    "input": {
        "column": None,
    },
    "steps": [],
    "reductions": ["min_max", "average"],
    "plot": {
        "enabled": False,
        "dpi": 140,
    },
}

# keys a step may carry besides the operation parameters
STEP_RESERVED_KEYS = {"op", "with"}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``override`` on a copy of ``base``.

    Sections such as ``plot`` merge key by key; a ``steps`` or
    ``reductions`` list in ``override`` replaces the base list whole.
    """

    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Read a pipeline config file; an empty file is an empty overlay."""

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"No pipeline config at {p}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Pipeline config {p} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Pipeline config {p} must hold a mapping, got {type(data).__name__}")
    return data


def resolve_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve run configuration from defaults, an optional user file and overrides."""

    resolved = deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        resolved = deep_merge(resolved, load_yaml(config_path))
    if overrides:
        resolved = deep_merge(resolved, overrides)
    validate_config(resolved)
    return resolved


def dump_yaml(data: dict[str, Any], out_path: str | Path) -> None:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def validate_config(cfg: dict[str, Any]) -> None:
    register_builtin_operations()

    try:
        resolve_dtype(cfg.get("precision"))
    except ValueError as exc:
        raise ConfigError(f"Unsupported precision '{cfg.get('precision')}'. Supported: float32|float64") from exc

    steps = cfg.get("steps")
    if not isinstance(steps, list):
        raise ConfigError("'steps' must be a list of mappings")
    for index, step in enumerate(steps):
        _validate_step(index, step)

    reductions = cfg.get("reductions")
    if not isinstance(reductions, list):
        raise ConfigError("'reductions' must be a list of operation names")
    for name in reductions:
        spec = _lookup(str(name), where="reductions")
        if spec.kind != "reduce":
            raise ConfigError(f"'{name}' is a {spec.kind} operation and cannot be used as a reduction")


def _validate_step(index: int, step: Any) -> None:
    if not isinstance(step, dict) or "op" not in step:
        raise ConfigError(f"steps[{index}] must be a mapping with an 'op' key")
    spec = _lookup(str(step["op"]), where=f"steps[{index}]")
    if spec.kind not in {"transform", "combine"}:
        raise ConfigError(
            f"steps[{index}]: '{spec.name}' is a {spec.kind} operation; steps must transform or combine sequences"
        )

    params = {k for k in step if k not in STEP_RESERVED_KEYS}
    unknown = sorted(params - set(spec.params))
    if unknown:
        raise ConfigError(f"steps[{index}]: unknown parameters for '{spec.name}': {', '.join(unknown)}")
    missing = sorted(set(spec.params) - params)
    if missing:
        raise ConfigError(f"steps[{index}]: missing parameters for '{spec.name}': {', '.join(missing)}")

    others = step.get("with")
    if spec.kind == "combine":
        if not isinstance(others, list) or not others:
            raise ConfigError(f"steps[{index}]: '{spec.name}' needs a non-empty 'with' list of columns")
    elif others is not None:
        raise ConfigError(f"steps[{index}]: 'with' is only valid for add and sub")


def _lookup(name: str, where: str):
    try:
        return get_operation(name)
    except RegistryError as exc:
        raise ConfigError(f"{where}: {exc.args[0]}") from exc
