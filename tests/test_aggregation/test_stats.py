"""Tests for grouping strategies and win-rate aggregation."""

import numpy as np
import pytest

from early_edge.aggregation.stats import aggregate, overall_winrate, winrate
from early_edge.aggregation.strategies import (
    BinnedStrategy, ExactValueStrategy, RoundedValueStrategy,
    format_key, round_half_up,
)
from early_edge.core.schema import GOLD_BINS, Record

GOLD = BinnedStrategy("gold_diff_10", GOLD_BINS)


def _rows_by_label(rows):
    return {r.label: (r.winrate, r.count) for r in rows}


class TestHelpers:
    def test_format_key_integral_float(self):
        assert format_key(2.0) == "2"

    def test_format_key_negative(self):
        assert format_key(-3) == "-3"

    def test_format_key_fraction(self):
        assert format_key(2.5) == "2.5"

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2

    def test_winrate_empty(self):
        assert winrate([]) == 0.0


class TestBinned:
    def test_three_record_example(self):
        records = [
            Record(win=0, gold_diff_10=-3500),
            Record(win=1, gold_diff_10=500),
            Record(win=1, gold_diff_10=500),
        ]
        rows = aggregate(records, GOLD)
        by_label = _rows_by_label(rows)
        assert by_label["< -3000"] == (0.0, 1)
        assert by_label["0 ~ 1000"] == (1.0, 2)
        for label, (wr, n) in by_label.items():
            if label not in ("< -3000", "0 ~ 1000"):
                assert (wr, n) == (0.0, 0)

    def test_always_eight_rows_in_order(self, records):
        rows = aggregate(records, GOLD)
        assert [r.label for r in rows] == [b.label for b in GOLD_BINS]

    def test_empty_input(self):
        rows = aggregate([], GOLD)
        assert len(rows) == 8
        assert all(r.count == 0 and r.winrate == 0.0 for r in rows)

    def test_boundaries(self):
        records = [
            Record(win=1, gold_diff_10=-3000),
            Record(win=1, gold_diff_10=0),
            Record(win=1, gold_diff_10=3000),
        ]
        by_label = _rows_by_label(aggregate(records, GOLD))
        assert by_label["-3000 ~ -2000"][1] == 1
        assert by_label["0 ~ 1000"][1] == 1
        assert by_label["> 3000"][1] == 1

    def test_extreme_values_land_in_end_bins(self):
        records = [
            Record(win=0, gold_diff_10=-20000),
            Record(win=1, gold_diff_10=20000),
        ]
        rows = aggregate(records, GOLD)
        assert rows[0].count == 1
        assert rows[-1].count == 1

    def test_missing_gold_excluded(self, records):
        rows = aggregate(records, GOLD)
        assert sum(r.count for r in rows) == len(records) - 1


class TestExactValue:
    def test_groups_ascending(self, records):
        rows = aggregate(records, ExactValueStrategy("dragons"))
        assert [r.label for r in rows] == ["0", "1", "2", "3"]

    def test_missing_skipped(self, records):
        rows = aggregate(records, ExactValueStrategy("dragons"))
        assert sum(r.count for r in rows) == 5
        assert "None" not in [r.label for r in rows]
        assert "nan" not in [r.label for r in rows]

    def test_winrate_per_group(self, records):
        by_label = _rows_by_label(aggregate(records, ExactValueStrategy("dragons")))
        assert by_label["2"] == (1.0, 2)
        assert by_label["1"] == (0.0, 1)

    def test_negative_keys_numeric_order(self):
        records = [Record(win=1, kills_diff_10=k) for k in (3, -10, 0, -2, 10)]
        rows = aggregate(records, ExactValueStrategy("kills_diff_10"))
        assert [r.label for r in rows] == ["-10", "-2", "0", "3", "10"]

    def test_zero_is_a_group(self):
        records = [Record(win=0, barons=0), Record(win=1, barons=None)]
        rows = aggregate(records, ExactValueStrategy("barons"))
        assert [(r.label, r.count) for r in rows] == [("0", 1)]

    def test_no_empty_groups(self):
        assert aggregate([], ExactValueStrategy("towers")) == []


class TestRoundedValue:
    def test_nearest_fifty(self, records):
        rows = aggregate(records, RoundedValueStrategy("vision_score", step=50))
        # 124.9 -> 100, 140 -> 150, 175 -> 200 (half up), 226 -> 250, 260 -> 250
        assert [(r.label, r.count) for r in rows] == [
            ("100", 1), ("150", 1), ("200", 1), ("250", 2),
        ]

    def test_half_rounds_up(self):
        records = [Record(win=1, vision_score=25.0), Record(win=0, vision_score=75.0)]
        rows = aggregate(records, RoundedValueStrategy("vision_score", step=50))
        assert [r.label for r in rows] == ["50", "100"]

    def test_invalid_step(self):
        with pytest.raises(ValueError, match="step"):
            RoundedValueStrategy("vision_score", step=0)


class TestAggregateProperties:
    @pytest.mark.parametrize("strategy", [
        GOLD,
        ExactValueStrategy("dragons"),
        ExactValueStrategy("towers"),
        ExactValueStrategy("kills_diff_10"),
        RoundedValueStrategy("vision_score"),
    ])
    def test_winrate_is_share_of_wins(self, strategy):
        rng = np.random.default_rng(7)
        records = [
            Record(
                win=int(rng.integers(0, 2)),
                gold_diff_10=int(rng.integers(-5000, 5000)),
                kills_diff_10=int(rng.integers(-5, 6)),
                dragons=int(rng.integers(0, 5)),
                towers=int(rng.integers(0, 12)),
                vision_score=float(rng.uniform(50, 350)),
            )
            for _ in range(300)
        ]
        rows = aggregate(records, strategy)
        groups = strategy.group(records)
        assert len(rows) == len(groups)
        for row, (label, members) in zip(rows, groups):
            assert row.label == label
            assert row.count == len(members)
            assert 0.0 <= row.winrate <= 1.0
            if members:
                assert row.winrate == pytest.approx(sum(m.win for m in members) / len(members))
            if not isinstance(strategy, BinnedStrategy):
                float(row.label)  # numeric label

    def test_unknown_strategy(self, records):
        with pytest.raises(TypeError, match="Unsupported grouping strategy"):
            aggregate(records, "gold")


class TestOverallWinrate:
    def test_mean_of_wins(self, records):
        assert overall_winrate(records) == pytest.approx(3 / 6)

    def test_empty(self):
        assert overall_winrate([]) == 0.0

    def test_includes_records_with_missing_fields(self):
        records = [Record(win=1), Record(win=1), Record(win=0, gold_diff_10=100)]
        assert overall_winrate(records) == pytest.approx(2 / 3)

    def test_matches_dataset_wins(self, dataset):
        assert overall_winrate(dataset.records) == float(dataset.wins.mean())
