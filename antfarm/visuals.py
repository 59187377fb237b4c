"""Visualization helpers that turn a simulation into a lightweight GIF."""
from __future__ import annotations

import io
from typing import List, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator
from PIL import Image

from .optimizer import RoutePlan
from .simulator import Ant, iter_positions

PATH_COLOURS: Sequence[str] = ("#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd", "#8c564b")


def _draw_frame(plan: RoutePlan, ants: Sequence[Ant], turn: int, ant_count: int, dpi: int) -> Image.Image:
    longest = max(len(path) for path in plan.paths)
    fig_height = max(2.5, 1.2 * len(plan.paths))
    fig, ax = plt.subplots(figsize=(10, fig_height))
    ax.set_facecolor("#111111")
    fig.patch.set_facecolor("#111111")

    for idx, path in enumerate(plan.paths):
        colour = PATH_COLOURS[idx % len(PATH_COLOURS)]
        xs = list(range(len(path)))
        ax.plot(xs, [idx] * len(xs), color=colour, alpha=0.35, linewidth=6, solid_capstyle="round")
        for x, room in zip(xs, path):
            ax.text(x, idx + 0.3, room, color="white", ha="center", va="bottom", fontsize=8)

    for ant in ants:
        if ant.done:
            continue
        colour = PATH_COLOURS[ant.path_idx % len(PATH_COLOURS)]
        ax.scatter([ant.position], [ant.path_idx], s=160, color=colour, edgecolors="white", zorder=3)
        ax.text(ant.position, ant.path_idx, str(ant.id), color="white", ha="center", va="center", fontsize=7, zorder=4)

    finished = sum(1 for ant in ants if ant.done)
    ax.set_xlim(-0.5, longest - 0.5)
    ax.set_ylim(-0.6, len(plan.paths) - 0.2)
    ax.set_xlabel("Room index along path", color="white")
    ax.set_title(f"Turn {turn}: {finished}/{ant_count} ants arrived", color="white", fontsize=12)
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.tick_params(colors="white")
    ax.set_yticks([])
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    frame = Image.open(buf).convert("P")
    buf.close()
    return frame


def render_progress_gif(plan: RoutePlan, ant_count: int, output_path: str, dpi: int = 100) -> None:
    """Render a GIF with one frame per turn of the simulated plan."""

    if not plan:
        return

    frames: List[Image.Image] = [
        _draw_frame(plan, ants, turn, ant_count, dpi) for turn, ants in iter_positions(plan, ant_count)
    ]
    first, *rest = frames
    first.save(output_path, format="GIF", save_all=True, append_images=rest, duration=400, loop=0)


__all__ = ["render_progress_gif"]
