"""Shared pytest fixtures for early_edge tests."""

import textwrap

import pytest

from early_edge.core.schema import Dataset, Record

CSV_HEADER = "gameid,side,golddiffat10,kills_diff_10,dragons,barons,towers,visionscore,win"


@pytest.fixture
def records():
    """Six team rows covering every metric, with a couple of gaps."""
    return [
        Record(win=0, gold_diff_10=-3500, kills_diff_10=-3, dragons=0, barons=0, towers=2, vision_score=140.0),
        Record(win=1, gold_diff_10=500, kills_diff_10=1, dragons=2, barons=1, towers=9, vision_score=226.0),
        Record(win=1, gold_diff_10=500, kills_diff_10=1, dragons=3, barons=1, towers=8, vision_score=175.0),
        Record(win=0, gold_diff_10=-800, kills_diff_10=0, dragons=None, barons=0, towers=3, vision_score=None),
        Record(win=1, gold_diff_10=2100, kills_diff_10=4, dragons=2, barons=2, towers=11, vision_score=260.0),
        Record(win=0, gold_diff_10=None, kills_diff_10=None, dragons=1, barons=0, towers=1, vision_score=124.9),
    ]


@pytest.fixture
def dataset(records):
    return Dataset(records=tuple(records), source="fixture")


@pytest.fixture
def csv_path(tmp_path):
    """A small team-match CSV with a blank cell, a text cell and a bad outcome."""
    body = textwrap.dedent("""\
        g1,Blue,-3500,-3,0,0,2,140,0
        g1,Red,3500,3,4,1,10,210,1
        g2,Blue,500,1,2,1,9,226,1
        g2,Red,-500,-1,,0,3,118,0
        g3,Blue,1200,2,n/a,0,7,175.5,1
        g3,Red,-1200,-2,1,0,4,150,0
        g4,Blue,0,0,1,0,5,160,draw
    """)
    path = tmp_path / "lol_team_clean.csv"
    path.write_text(CSV_HEADER + "\n" + body)
    return path


@pytest.fixture
def config(tmp_path, csv_path):
    """Minimal config dict pointing at the CSV fixture."""
    return {
        "paths": {"dataset": str(csv_path), "reports": str(tmp_path / "reports")},
        "model": {},
        "dashboard": {"chart": {"width": 400, "height": 200}},
    }
