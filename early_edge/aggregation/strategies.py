"""
Grouping strategies for win-rate aggregation.

A strategy decides which group a record falls into and how groups are
ordered. Records whose grouping field is absent never form a group.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from early_edge.core.schema import GOLD_BINS, GoldBin, Record


def format_key(value: float) -> str:
    """Label for a numeric group key; integral values print without '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class BinnedStrategy:
    """Fixed, ordered half-open bins. Every bin yields a row, even if empty."""
    field: str
    bins: tuple[GoldBin, ...] = GOLD_BINS

    def group(self, records) -> list[tuple[str, list[Record]]]:
        groups = [(b.label, []) for b in self.bins]
        for r in records:
            val = r.value(self.field)
            if val is None:
                continue
            for i, b in enumerate(self.bins):
                if b.contains(val):
                    groups[i][1].append(r)
                    break
        return groups


@dataclass(frozen=True)
class ExactValueStrategy:
    """One group per distinct value, ascending."""
    field: str

    def key(self, value: float) -> float:
        return value

    def group(self, records) -> list[tuple[str, list[Record]]]:
        by_key: dict[float, list[Record]] = {}
        for r in records:
            val = r.value(self.field)
            if val is None:
                continue
            by_key.setdefault(self.key(val), []).append(r)
        return [(format_key(k), by_key[k]) for k in sorted(by_key)]


@dataclass(frozen=True)
class RoundedValueStrategy(ExactValueStrategy):
    """Groups by the nearest multiple of step (halves round up)."""
    step: float = 50

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"step must be > 0, got {self.step}")

    def key(self, value: float) -> float:
        return round_half_up(value / self.step) * self.step


GroupingStrategy = BinnedStrategy | ExactValueStrategy | RoundedValueStrategy
