"""
Team-match CSV loader.

Reads the cleaned per-team match export (one row = one team in one match)
into an immutable Dataset. Expected columns:

  golddiffat10   gold difference at 10:00
  kills_diff_10  kill difference at 10:00
  dragons, barons, towers   objectives taken by the team
  visionscore    team vision score
  win            1 = this team won
"""

import logging
from pathlib import Path

import pandas as pd

from early_edge.core.schema import Dataset, Record
from early_edge.core.interfaces import BaseLoader
from early_edge.ingestion.base import find_column, parse_win, safe_float, safe_int

log = logging.getLogger(__name__)

# Record attribute -> accepted header spellings
COLUMN_CANDIDATES = {
    "gold_diff_10": ["golddiffat10", "gold_diff_10", "golddiff10"],
    "kills_diff_10": ["kills_diff_10", "killsdiffat10", "killdiffat10"],
    "dragons": ["dragons", "dragon"],
    "barons": ["barons", "baron"],
    "towers": ["towers", "tower"],
    "vision_score": ["visionscore", "vision_score"],
    "win": ["win", "result"],
}

INT_FIELDS = ("kills_diff_10", "dragons", "barons", "towers")
FLOAT_FIELDS = ("gold_diff_10", "vision_score")


class TeamCsvLoader(BaseLoader):
    """Loads the team-match CSV once for the session."""

    def __init__(self, path: str, delimiter: str = ","):
        self.path = Path(path)
        self.delimiter = delimiter

    def load(self) -> Dataset:
        if not self.path.exists():
            raise FileNotFoundError(f"Dataset not found: {self.path}")

        df = pd.read_csv(self.path, sep=self.delimiter, low_memory=False)
        dataset = self._build_dataset(df)
        log.info(f"Loaded {dataset.n_records} team rows from {self.path}")
        return dataset

    def validate(self, dataset: Dataset) -> list[str]:
        warnings = []
        if dataset.n_records == 0:
            warnings.append(f"{self.path}: no usable rows")
        for name in COLUMN_CANDIDATES:
            if name == "win":
                continue
            missing = sum(1 for r in dataset.records if r.value(name) is None)
            if missing:
                warnings.append(
                    f"{name}: {missing}/{dataset.n_records} rows missing"
                )
        return warnings

    def _build_dataset(self, df: pd.DataFrame) -> Dataset:
        columns = resolve_columns(df)

        records = []
        skipped = 0
        for idx, row in df.iterrows():
            record = row_to_record(row, columns)
            if record is None:
                skipped += 1
                if skipped <= 10:
                    log.warning(f"Row {idx}: win={row[columns['win']]!r} is not 0/1, skipped")
                continue
            records.append(record)

        if skipped:
            log.warning(f"Skipped {skipped} rows without a 0/1 outcome")

        return Dataset(
            records=tuple(records),
            source=str(self.path),
            columns=tuple(str(c) for c in df.columns),
        )


def resolve_columns(df: pd.DataFrame) -> dict[str, str]:
    """Map every Record field to a column of df; fail on any missing."""
    columns = {}
    missing = []
    for name, candidates in COLUMN_CANDIDATES.items():
        col = find_column(df, candidates)
        if col is None:
            missing.append(candidates[0])
        else:
            columns[name] = col
    if missing:
        raise ValueError(f"Dataset is missing required columns: {', '.join(missing)}")
    return columns


def row_to_record(row: pd.Series, columns: dict[str, str]) -> Record | None:
    """Build a Record from one row, or None when the outcome is unusable."""
    win = parse_win(row[columns["win"]])
    if win is None:
        return None

    values = {}
    for name in INT_FIELDS:
        values[name] = safe_int(row[columns[name]])
    for name in FLOAT_FIELDS:
        values[name] = safe_float(row[columns[name]])

    # Negative objective counts are data errors; treat as absent.
    for name in ("dragons", "barons", "towers", "vision_score"):
        if values[name] is not None and values[name] < 0:
            values[name] = None

    return Record(win=win, **values)
