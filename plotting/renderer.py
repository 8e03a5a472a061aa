from __future__ import annotations

from typing import Optional, Sequence
import logging
import os
import numpy as np
import matplotlib.pyplot as plt

from composition.config import PlotConfig
from composition.scene import Scene

from plotting.vectorizer import draw_scene_on_axis


logger = logging.getLogger(__name__)


def render_history_grid(
    history: Sequence[Scene],
    out_path: str,
    cfg: PlotConfig = PlotConfig(),
    titles: Optional[Sequence[str]] = None,
) -> None:
    """
    Renders one cell per scene snapshot, left to right and top to bottom.
    The format (svg or png) follows the file extension.
    """
    n = len(history)
    if n == 0:
        raise ValueError("No snapshots to render")
    cols = max(1, min(cfg.cols, n))
    rows = (n + cols - 1) // cols
    fig_w = cfg.figsize_per_cell[0] * cols
    fig_h = cfg.figsize_per_cell[1] * rows

    fig, axes = plt.subplots(rows, cols, figsize=(fig_w, fig_h), constrained_layout=True, squeeze=False)
    fig.patch.set_facecolor('white')
    axes = np.asarray(axes)

    for idx, scene in enumerate(history):
        ax = axes[idx // cols, idx % cols]
        ax.set_facecolor('white')
        draw_scene_on_axis(ax, scene, draw_frames=cfg.draw_frames)
        title = titles[idx] if titles is not None else f"{idx}"
        ax.set_title(title, fontsize=10, color='black')

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    fmt = "svg" if out_path.endswith(".svg") else "png"
    fig.savefig(out_path, dpi=cfg.dpi, format=fmt, transparent=False, facecolor='white')
    plt.close(fig)
    logger.info("Rendered %d snapshots -> %s", n, out_path)
