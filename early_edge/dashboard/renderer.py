"""
Bar chart renderer for ChartViews.

One fixed encoding: one bar per SummaryRow, height = win rate on a [0, 1]
axis, plus a dashed line at the overall win rate.
"""

import io
import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import PercentFormatter

from early_edge.core.interfaces import BaseRenderer

log = logging.getLogger(__name__)

DEFAULT_CHART = {
    "width": 760,
    "height": 360,
    "dpi": 100,
    "margin": {"top": 30, "right": 20, "bottom": 60, "left": 60},
    "bar_color": "#3b82f6",
    "baseline_color": "#6b7280",
    "baseline_label_color": "#9ca3af",
    "text_color": "#e5e7eb",
    "background": "#111827",
}


class ChartRenderer(BaseRenderer):
    """Draws ChartViews with matplotlib (Agg backend)."""

    def __init__(self, chart_cfg: dict | None = None):
        self.cfg = {**DEFAULT_CHART, **(chart_cfg or {})}
        self.cfg["margin"] = {**DEFAULT_CHART["margin"], **self.cfg.get("margin", {})}

    def render(self, view):
        c = self.cfg
        dpi = c["dpi"]
        fig, ax = plt.subplots(figsize=(c["width"] / dpi, c["height"] / dpi), dpi=dpi)

        m = c["margin"]
        fig.subplots_adjust(
            left=m["left"] / c["width"],
            right=1 - m["right"] / c["width"],
            top=1 - m["top"] / c["height"],
            bottom=m["bottom"] / c["height"],
        )
        fig.patch.set_facecolor(c["background"])
        ax.set_facecolor(c["background"])

        labels = view.labels
        heights = [r.winrate for r in view.rows]
        x = range(len(labels))
        ax.bar(x, heights, width=0.8, color=c["bar_color"])

        ax.set_ylim(0, 1)
        ax.yaxis.set_major_formatter(PercentFormatter(xmax=1.0, decimals=0))
        ax.set_yticks([0, 0.2, 0.4, 0.6, 0.8, 1.0])
        ax.set_xticks(list(x))
        if view.x_label_rotation:
            ax.set_xticklabels(labels, rotation=view.x_label_rotation, ha="left")
        else:
            ax.set_xticklabels(labels)

        # Baseline
        ax.axhline(
            view.overall_winrate, color=c["baseline_color"],
            linestyle=(0, (4, 3)), linewidth=1,
        )
        ax.text(
            0.995, view.overall_winrate + 0.02, view.baseline_label,
            transform=ax.get_yaxis_transform(), ha="right", va="bottom",
            color=c["baseline_label_color"], fontsize=8,
        )

        ax.set_title("Win Rate", loc="left", color=c["text_color"], fontsize=8)
        fig.suptitle(view.title, color=c["text_color"], fontsize=10)
        ax.tick_params(colors=c["text_color"], labelsize=8)
        for spine in ax.spines.values():
            spine.set_color(c["baseline_color"])

        return fig

    def save(self, view, path: str) -> str:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig = self.render(view)
        try:
            fig.savefig(out, facecolor=fig.get_facecolor())
        finally:
            plt.close(fig)
        log.info(f"Chart saved to {out}")
        return str(out)

    def to_png(self, view) -> bytes:
        fig = self.render(view)
        buf = io.BytesIO()
        try:
            fig.savefig(buf, format="png", facecolor=fig.get_facecolor())
        finally:
            plt.close(fig)
        return buf.getvalue()
