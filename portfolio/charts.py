# portfolio/charts.py · stack radar
# ----------------------------------------------------------

from __future__ import annotations
import math
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np

# (line, label, grid) per theme; line matches the accent in the page CSS
PALETTE = {
    True: ((0.13, 0.83, 0.93, 0.95), "#f3f4f6", "#9ca3af"),
    False: ((0.06, 0.73, 0.51, 0.95), "#1f2937", "#6b7280"),
}


def radar_figure(title: str, scores: Dict[str, float], dark: bool, size_px: int = 520):
    labels = list(scores.keys())
    values = list(scores.values())
    angles = np.linspace(0, 2 * math.pi, len(labels), endpoint=False).tolist()
    angles += angles[:1]
    v = values + values[:1]
    line_color, label_color, grid_color = PALETTE[bool(dark)]

    dpi = 200
    fig = plt.figure(figsize=(size_px / dpi, size_px / dpi), dpi=dpi)
    ax = plt.subplot(111, polar=True)
    fig.patch.set_alpha(0.0)
    ax.set_facecolor("none")
    ax.set_theta_offset(math.pi / 2)
    ax.set_theta_direction(-1)
    ax.set_xticks(angles[:-1])
    ax.set_xticklabels(labels, fontsize=7, color=label_color)
    ax.tick_params(pad=6, colors=label_color)
    ax.set_ylim(0, 100)
    ax.set_yticks([20, 40, 60, 80, 100])
    ax.set_yticklabels([20, 40, 60, 80, 100], fontsize=5, color=grid_color)
    ax.yaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    ax.xaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    # soft glow under the main line
    for lw, a in [(10, 0.06), (8, 0.08), (6, 0.10), (4, 0.12)]:
        ax.plot(angles, v, linewidth=lw, color=(line_color[0], line_color[1], line_color[2], a))
    ax.plot(angles, v, linewidth=2, color=line_color)
    ax.fill(angles, v, alpha=0.10, color=line_color)
    ax.set_title(title, y=1.15, fontsize=10, color=line_color)
    return fig
