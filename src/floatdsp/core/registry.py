"""Operation registry used by the pipeline, the CLI and precision binding."""

from __future__ import annotations

from typing import Any, Callable

from floatdsp.core.types import OPERATION_KINDS, OperationSpec

_OPERATIONS: dict[str, OperationSpec] = {}


class RegistryError(KeyError):
    """Raised when an operation cannot be resolved."""


def register_operation(
    name: str,
    func: Callable[..., Any],
    kind: str,
    params: tuple[str, ...] = (),
) -> OperationSpec:
    key = name.strip().lower()
    if not key:
        raise RegistryError("Operation name cannot be empty")
    if kind not in OPERATION_KINDS:
        raise RegistryError(f"Unknown operation kind '{kind}' for '{name}'")
    doc = (func.__doc__ or "").strip().splitlines()
    spec = OperationSpec(name=key, func=func, kind=kind, params=tuple(params), doc=doc[0] if doc else "")
    _OPERATIONS[key] = spec
    return spec


def get_operation(name: str) -> OperationSpec:
    key = name.strip().lower()
    if key not in _OPERATIONS:
        available = ", ".join(sorted(_OPERATIONS)) or "none"
        raise RegistryError(f"Unknown operation '{name}'. Available operations: {available}")
    return _OPERATIONS[key]


def available_operations() -> list[str]:
    return sorted(_OPERATIONS)


def operations() -> dict[str, OperationSpec]:
    return dict(_OPERATIONS)


def clear_registry() -> None:
    _OPERATIONS.clear()
