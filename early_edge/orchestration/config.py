"""Config loading with validation."""

import yaml
from pathlib import Path

REQUIRED_KEYS = ("paths", "model", "dashboard")


def load_config(path: str = "configs/default.yaml") -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(p) as f:
        cfg = yaml.safe_load(f) or {}

    # Validate required keys
    for key in REQUIRED_KEYS:
        if key not in cfg:
            raise ValueError(f"Missing config key: {key}")
    if "dataset" not in cfg["paths"]:
        raise ValueError("Missing config key: paths.dataset")
    return cfg
