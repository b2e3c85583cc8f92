"""Core package types shared by operations, registry and pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple

import numpy as np


class MinMax(NamedTuple):
    """Indices and values of the first minimum and first maximum of a sequence."""

    min_index: int
    min_value: float
    max_index: int
    max_value: float


OPERATION_KINDS = ("transform", "combine", "reduce", "generate", "scalar")


@dataclass(frozen=True)
class OperationSpec:
    """Registry entry describing how an operation is called."""

    name: str
    func: Callable[..., Any]
    kind: str
    params: tuple[str, ...] = ()
    doc: str = ""


@dataclass(frozen=True)
class StepRecord:
    op: str
    params: dict[str, Any]
    length_in: int
    length_out: int


@dataclass(frozen=True)
class PipelineResult:
    series: np.ndarray
    reductions: dict[str, Any]
    steps: list[StepRecord] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
