from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def plot_utility_grid(
    grid: pd.DataFrame,
    path: str | Path,
    *,
    arrows: Optional[pd.DataFrame] = None,
    title: str = "State utilities",
) -> Path:
    """Heatmap of a utility grid as produced by GridMDP.show_grid.

    Obstacles (None) are left blank. When `arrows` is given each cell is
    annotated with its policy arrow next to the utility value.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    values = grid.apply(pd.to_numeric, errors="coerce").to_numpy(dtype=float)
    masked = np.ma.masked_invalid(values)

    fig, ax = plt.subplots(figsize=(1.6 * max(1, grid.shape[1]) + 1.5, 1.4 * max(1, grid.shape[0]) + 1.0))
    im = ax.imshow(masked, cmap="RdYlGn", interpolation="nearest")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    for i in range(values.shape[0]):
        for j in range(values.shape[1]):
            if not np.isfinite(values[i, j]):
                continue
            label = f"{values[i, j]:.3f}"
            if arrows is not None:
                label = f"{arrows.iat[i, j]}\n{label}"
            ax.text(j, i, label, ha="center", va="center", fontsize=9)

    ax.set_xticks(range(grid.shape[1]))
    ax.set_xticklabels([str(c) for c in grid.columns])
    ax.set_yticks(range(grid.shape[0]))
    ax.set_yticklabels([str(r) for r in grid.index])
    ax.set_xlabel("col")
    ax.set_ylabel("row")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=140)
    plt.close(fig)
    return out
