"""
Early Edge domain objects.

Every loader normalizes into these types. Every module in the project
depends on this file; this file depends on nothing else.

Validation rules are enforced at construction time via __post_init__.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np


# ── Enums ──────────────────────────────────────────────────────────────

class Metric(Enum):
    """Dashboard metrics a chart can be grouped by."""
    GOLD = "gold"
    DRAGON = "dragon"
    BARON = "baron"
    TOWERS = "towers"
    KILLS = "kills"
    VISION = "vision"

    @classmethod
    def parse(cls, value: "Metric | str") -> "Metric":
        """Resolve a selector string (e.g. from a button) to a Metric."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown metric '{value}'. Available: {available}"
            ) from None


# Record attribute -> dataset column
FIELD_COLUMNS = {
    "gold_diff_10": "golddiffat10",
    "kills_diff_10": "kills_diff_10",
    "dragons": "dragons",
    "barons": "barons",
    "towers": "towers",
    "vision_score": "visionscore",
    "win": "win",
}


# ── Domain Objects ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Record:
    """One team's performance in one match.

    Statistic fields are None when absent or non-numeric in the source row.
    """
    win: int
    gold_diff_10: Optional[float] = None
    kills_diff_10: Optional[int] = None
    dragons: Optional[int] = None
    barons: Optional[int] = None
    towers: Optional[int] = None
    vision_score: Optional[float] = None

    def __post_init__(self):
        win = self.win
        if isinstance(win, (bool, np.bool_)):
            win = int(win)
        if win not in (0, 1):
            raise ValueError(f"win must be 0 or 1, got {self.win!r}")
        object.__setattr__(self, "win", int(win))

        for name in ("dragons", "barons", "towers", "vision_score"):
            val = getattr(self, name)
            if val is not None and val < 0:
                raise ValueError(f"{name} must be >= 0, got {val}")

    def value(self, name: str) -> Optional[float]:
        """Numeric value of a grouping field, or None when absent."""
        if name not in FIELD_COLUMNS:
            raise ValueError(f"Unknown record field '{name}'")
        val = getattr(self, name)
        if val is None or isinstance(val, bool):
            return None
        if isinstance(val, float) and math.isnan(val):
            return None
        return val


@dataclass(frozen=True)
class GoldBin:
    """Half-open interval [min, max) of 10-minute gold difference."""
    label: str
    min: float
    max: float

    def __post_init__(self):
        if self.min >= self.max:
            raise ValueError(
                f"bin '{self.label}' has min={self.min} >= max={self.max}"
            )

    def contains(self, value: float) -> bool:
        return self.min <= value < self.max


GOLD_BINS: tuple[GoldBin, ...] = (
    GoldBin("< -3000", -math.inf, -3000),
    GoldBin("-3000 ~ -2000", -3000, -2000),
    GoldBin("-2000 ~ -1000", -2000, -1000),
    GoldBin("-1000 ~ 0", -1000, 0),
    GoldBin("0 ~ 1000", 0, 1000),
    GoldBin("1000 ~ 2000", 1000, 2000),
    GoldBin("2000 ~ 3000", 2000, 3000),
    GoldBin("> 3000", 3000, math.inf),
)


@dataclass(frozen=True)
class SummaryRow:
    """Win-rate summary of one group (bin or distinct value)."""
    label: str
    winrate: float
    count: int

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if not 0.0 <= self.winrate <= 1.0:
            raise ValueError(f"winrate must be in [0, 1], got {self.winrate}")

    def to_dict(self) -> dict:
        return {"label": self.label, "winrate": self.winrate, "count": self.count}


# ── Data Transfer Objects ──────────────────────────────────────────────

@dataclass(frozen=True)
class Dataset:
    """The loaded team-match rows, read-only for the whole session.

    This is the contract between ingestion/ and everything downstream.
    """
    records: tuple[Record, ...]
    source: str = ""
    columns: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def n_records(self) -> int:
        return len(self.records)

    @property
    def wins(self) -> np.ndarray:
        return np.array([r.win for r in self.records], dtype=np.float64)
