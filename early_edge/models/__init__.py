from early_edge.models.win_prob import WinProbabilityModel, predict  # noqa: F401
