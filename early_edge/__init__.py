"""
Early Edge — 10-minute statistics vs. match outcome

Groups team-match rows into win-rate summaries for a bar-chart dashboard
and evaluates a fixed logistic model for early-game win probability.
"""

__version__ = "0.1.0"
