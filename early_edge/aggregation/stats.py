"""Win-rate aggregation over team-match records.

Pure functions: records in, SummaryRows out. Nothing here reads files or
keeps state between calls.
"""

from __future__ import annotations

import logging

import numpy as np

from early_edge.aggregation.strategies import (
    BinnedStrategy,
    ExactValueStrategy,
    GroupingStrategy,
)
from early_edge.core.schema import Record, SummaryRow

log = logging.getLogger(__name__)


def winrate(records: list[Record]) -> float:
    """Mean of win over records; 0.0 for an empty group."""
    if not records:
        return 0.0
    return sum(r.win for r in records) / len(records)


def aggregate(records, strategy: GroupingStrategy) -> list[SummaryRow]:
    """Group records with strategy and summarize each group.

    Args:
        records: Record sequence (or a Dataset).
        strategy: BinnedStrategy, ExactValueStrategy or RoundedValueStrategy.

    Returns:
        SummaryRows in the strategy's order (declared bin order, or
        ascending key for value grouping).
    """
    if not isinstance(strategy, (BinnedStrategy, ExactValueStrategy)):
        raise TypeError(f"Unsupported grouping strategy: {strategy!r}")

    groups = strategy.group(records)
    rows = [
        SummaryRow(label=label, winrate=winrate(members), count=len(members))
        for label, members in groups
    ]
    log.debug(f"Aggregated {len(rows)} groups on '{strategy.field}'")
    return rows


def overall_winrate(records) -> float:
    """Unconditional mean win rate (the chart's baseline); 0.0 if empty."""
    wins = np.array([r.win for r in records], dtype=np.float64)
    if wins.size == 0:
        return 0.0
    return float(wins.mean())
