"""
Dashboard controller.

Turns UI events (metric button, simulator inputs) into view objects for
the renderer / web layer. Holds the session Dataset, which never changes
after construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from early_edge.aggregation.stats import aggregate, overall_winrate
from early_edge.core.schema import Dataset, Metric, SummaryRow
from early_edge.dashboard.captions import CaptionBand, caption_for
from early_edge.dashboard.metrics import get_spec, list_metrics
from early_edge.models.win_prob import WinProbabilityModel, to_percent

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartView:
    """Everything needed to draw one metric's bar chart."""
    metric: Metric
    title: str
    description: str
    rows: tuple[SummaryRow, ...]
    overall_winrate: float
    tooltips: tuple[str, ...] = field(default_factory=tuple)
    x_label_rotation: int = 0

    @property
    def labels(self) -> list[str]:
        return [r.label for r in self.rows]

    @property
    def baseline_label(self) -> str:
        return f"Overall ≈ {self.overall_winrate:.0%}"

    def to_dict(self) -> dict:
        return {
            "metric": self.metric.value,
            "title": self.title,
            "description": self.description,
            "rows": [r.to_dict() for r in self.rows],
            "tooltips": list(self.tooltips),
            "overall_winrate": self.overall_winrate,
            "baseline_label": self.baseline_label,
            "x_label_rotation": self.x_label_rotation,
        }


@dataclass(frozen=True)
class SimulatorView:
    gold_diff_10: float
    kills_diff_10: int
    first_dragon: int
    probability: float
    percent: int
    band: CaptionBand
    caption: str

    @property
    def display(self) -> str:
        return f"{self.percent}%"

    def to_dict(self) -> dict:
        return {
            "gold_diff_10": self.gold_diff_10,
            "kills_diff_10": self.kills_diff_10,
            "first_dragon": self.first_dragon,
            "probability": self.probability,
            "percent": self.percent,
            "display": self.display,
            "band": self.band.value,
            "caption": self.caption,
        }


class DashboardController:
    """Wires metric selection and the win-probability simulator."""

    def __init__(self, dataset: Dataset, model: WinProbabilityModel | None = None):
        self.dataset = dataset
        self.model = model or WinProbabilityModel()
        self.overall_winrate = overall_winrate(dataset.records)
        self.active_view: ChartView | None = None

    def metrics(self) -> list[str]:
        return list_metrics()

    def select_metric(self, metric: Metric | str) -> ChartView:
        """Recompute the chart for metric, replacing the active view."""
        spec = get_spec(metric)
        rows = tuple(aggregate(self.dataset.records, spec.strategy))
        view = ChartView(
            metric=spec.metric,
            title=spec.title,
            description=spec.description,
            rows=rows,
            overall_winrate=self.overall_winrate,
            tooltips=tuple(spec.tooltip(r) for r in rows),
            x_label_rotation=spec.x_label_rotation,
        )
        self.active_view = view
        log.info(f"Metric '{spec.metric.value}': {len(rows)} bars")
        return view

    def simulate(
        self, gold_diff_10: float, kills_diff_10: int, first_dragon: int = 0,
    ) -> SimulatorView:
        """Evaluate the simulator inputs and pick the caption."""
        p = self.model.predict(gold_diff_10, kills_diff_10, first_dragon)
        pct = to_percent(p)
        band, caption = caption_for(pct)
        return SimulatorView(
            gold_diff_10=gold_diff_10,
            kills_diff_10=kills_diff_10,
            first_dragon=int(first_dragon),
            probability=p,
            percent=pct,
            band=band,
            caption=caption,
        )
