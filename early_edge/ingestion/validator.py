"""
Post-load data quality validation.

Runs integrity checks on a loaded Dataset before it is handed to
the dashboard.
"""

import logging
from collections import Counter

from early_edge.core.schema import Dataset, FIELD_COLUMNS

log = logging.getLogger(__name__)

# Plausible ranges at the 10-minute mark / end of game
RANGES = {
    "gold_diff_10": (-15000, 15000),
    "kills_diff_10": (-30, 30),
    "dragons": (0, 10),
    "barons": (0, 6),
    "towers": (0, 11),
    "vision_score": (0, 1000),
}


class DataValidator:
    """Validates a Dataset for quality issues."""

    def validate(self, dataset: Dataset) -> dict:
        """Run all checks. Returns summary dict + logs warnings."""
        issues = []
        stats = Counter()

        stats["records"] = dataset.n_records
        if dataset.n_records == 0:
            issues.append(("error", f"{dataset.source or 'dataset'}: zero records"))

        for name in FIELD_COLUMNS:
            if name == "win":
                continue
            lo, hi = RANGES[name]
            for r in dataset.records:
                val = r.value(name)
                if val is None:
                    stats[f"missing_{name}"] += 1
                elif not lo <= val <= hi:
                    stats[f"out_of_range_{name}"] += 1

            n_missing = stats[f"missing_{name}"]
            if dataset.n_records and n_missing == dataset.n_records:
                issues.append(("warn", f"{name}: every record is missing this field"))
            n_out = stats[f"out_of_range_{name}"]
            if n_out:
                issues.append((
                    "warn",
                    f"{name}: {n_out} values outside [{lo}, {hi}]"
                ))

        # Label balance: every match contributes one winning and one losing row
        if dataset.n_records:
            win_rate = float(dataset.wins.mean())
            if win_rate < 0.4 or win_rate > 0.6:
                issues.append((
                    "warn",
                    f"Overall win rate is {win_rate:.2%} — "
                    f"expected close to 50% for paired team rows"
                ))
            stats["win_rate"] = round(win_rate, 4)

        errors = [msg for level, msg in issues if level == "error"]
        warns = [msg for level, msg in issues if level == "warn"]

        if errors:
            log.error(f"Data validation: {len(errors)} errors")
            for e in errors[:10]:
                log.error(f"  {e}")
        if warns:
            log.warning(f"Data validation: {len(warns)} warnings")
            for w in warns[:10]:
                log.warning(f"  {w}")

        return {
            "stats": dict(stats),
            "errors": errors,
            "warnings": warns,
            "is_clean": len(errors) == 0,
        }
