"""
Metric catalogue: what each dashboard button groups by and how it is shown.

Every Metric must have exactly one MetricSpec; the check at the bottom of
this module fails the import otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from early_edge.aggregation.strategies import (
    BinnedStrategy,
    ExactValueStrategy,
    GroupingStrategy,
    RoundedValueStrategy,
)
from early_edge.core.schema import GOLD_BINS, Metric, SummaryRow

VISION_STEP = 50


def _suffix(unit: str) -> Callable[[str], str]:
    return lambda label: f"{label} {unit}"


@dataclass(frozen=True)
class MetricSpec:
    metric: Metric
    strategy: GroupingStrategy
    title: str
    description: str
    tooltip_label: Callable[[str], str]
    x_label_rotation: int = 0

    def tooltip(self, row: SummaryRow) -> str:
        """Hover text for one bar."""
        return (
            f"{self.tooltip_label(row.label)}\n"
            f"Win rate: {row.winrate:.1%}\n"
            f"Games: {row.count}"
        )


METRIC_SPECS: dict[Metric, MetricSpec] = {
    Metric.GOLD: MetricSpec(
        metric=Metric.GOLD,
        strategy=BinnedStrategy("gold_diff_10", GOLD_BINS),
        title="Figure — 10-Minute Gold Difference vs Win Rate",
        description=(
            "The gold difference between teams at the 10-minute mark is a powerful "
            "predictor of victory. Once a team is ahead by more than +1k gold, its "
            "chance of winning rises sharply, indicating how decisive early tempo "
            "advantages are in professional play."
        ),
        tooltip_label=lambda label: label,
        x_label_rotation=25,
    ),
    Metric.DRAGON: MetricSpec(
        metric=Metric.DRAGON,
        strategy=ExactValueStrategy("dragons"),
        title="Figure — Dragon Control vs Win Rate",
        description=(
            "Dragon control plays a critical role in shaping mid-to-late-game "
            "outcomes. Each dragon secured provides stacking buffs that strengthen "
            "a team's skirmishing and objective power, leading to a steadily "
            "increasing likelihood of winning the match."
        ),
        tooltip_label=_suffix("dragons"),
    ),
    Metric.BARON: MetricSpec(
        metric=Metric.BARON,
        strategy=ExactValueStrategy("barons"),
        title="Figure — Baron Control vs Win Rate",
        description=(
            "Securing Baron Nashor is one of the most decisive turning points in "
            "professional play. The Baron buff dramatically enhances siege "
            "potential and map control, often enabling teams to convert their "
            "advantage into a game-winning push."
        ),
        tooltip_label=_suffix("barons"),
    ),
    Metric.TOWERS: MetricSpec(
        metric=Metric.TOWERS,
        strategy=ExactValueStrategy("towers"),
        title="Figure — Tower Control vs Win Rate",
        description=(
            "Towers are permanent map objectives that open pathways and increase "
            "map pressure. Teams that secure more towers consistently gain greater "
            "control of rotations, enabling safer vision, deeper jungle access, "
            "and a higher chance of winning."
        ),
        tooltip_label=_suffix("towers"),
    ),
    Metric.KILLS: MetricSpec(
        metric=Metric.KILLS,
        strategy=ExactValueStrategy("kills_diff_10"),
        title="Figure — Early Kill Difference vs Win Rate",
        description=(
            "Early kill leads often translate into more gold, lane pressure, and "
            "objective control. Teams with higher kill advantage at 10 minutes "
            "tend to snowball their tempo advantages into higher mid-game win rates."
        ),
        tooltip_label=_suffix("kill diff"),
    ),
    Metric.VISION: MetricSpec(
        metric=Metric.VISION,
        strategy=RoundedValueStrategy("vision_score", step=VISION_STEP),
        title="Figure — Vision Score vs Win Rate",
        description=(
            "Vision Score reflects a team's control over fog of war. Higher vision "
            "enables safer objective setups, ambush prevention, and better macro "
            "decisions, strongly contributing to higher win rates in coordinated play."
        ),
        tooltip_label=_suffix("vision score"),
    ),
}


def get_spec(metric: Metric | str) -> MetricSpec:
    """MetricSpec for a Metric or selector string (ValueError if unknown)."""
    return METRIC_SPECS[Metric.parse(metric)]


def list_metrics() -> list[str]:
    return [m.value for m in Metric]


_missing = set(Metric) - set(METRIC_SPECS)
if _missing:
    raise RuntimeError(f"No MetricSpec for: {sorted(m.value for m in _missing)}")
