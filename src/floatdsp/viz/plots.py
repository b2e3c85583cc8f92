"""Plotting helpers for pipeline outputs."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np


def plot_series(
    raw: np.ndarray,
    transformed: np.ndarray,
    out_path: str | Path,
    dpi: int = 140,
    title: str = "Input and transformed series",
) -> Path:
    """Overlay the input and the transformed series against sample index.

    Windowed filters shorten the series; the transformed curve is drawn from
    index 0 without re-centring.
    """

    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 4))
    if len(raw) > 0:
        ax.plot(np.arange(len(raw)), raw, linewidth=1.0, alpha=0.6, label="input")
    if len(transformed) > 0:
        ax.plot(np.arange(len(transformed)), transformed, linewidth=1.5, label="output")
    if len(raw) == 0 and len(transformed) == 0:
        ax.text(0.5, 0.5, "Empty series", ha="center", va="center")
    else:
        ax.legend()
    ax.set_xlabel("index")
    ax.set_ylabel("value")
    ax.set_title(title)
    ax.grid(alpha=0.3)
    fig.tight_layout()
    fig.savefig(p, dpi=dpi)
    plt.close(fig)
    return p
