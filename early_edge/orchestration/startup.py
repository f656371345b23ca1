"""
Two-step startup: load the dataset, then build the dashboard on it.

If loading fails the error propagates and no controller is ever built.
"""

import logging

from early_edge.core.schema import Dataset
from early_edge.dashboard.controller import DashboardController
from early_edge.dashboard.renderer import ChartRenderer
from early_edge.ingestion.team_csv import TeamCsvLoader
from early_edge.ingestion.validator import DataValidator
from early_edge.models.win_prob import WinProbabilityModel

log = logging.getLogger(__name__)


def load_dataset(cfg: dict) -> Dataset:
    """Step 1: read the configured CSV once."""
    path = cfg["paths"]["dataset"]
    delimiter = cfg.get("dataset", {}).get("delimiter", ",")
    log.info(f"Startup step 1: loading {path}")
    loader = TeamCsvLoader(path, delimiter=delimiter)
    dataset = loader.load()
    for w in loader.validate(dataset):
        log.warning(f"  {w}")
    return dataset


def build_controller(dataset: Dataset, cfg: dict) -> DashboardController:
    """Step 2: construct the dashboard over the loaded dataset."""
    log.info(f"Startup step 2: building dashboard over {dataset.n_records} records")
    model = WinProbabilityModel.from_config(cfg.get("model"))
    return DashboardController(dataset, model=model)


def build_renderer(cfg: dict) -> ChartRenderer:
    return ChartRenderer(cfg.get("dashboard", {}).get("chart"))


def start(cfg: dict) -> tuple[DashboardController, dict]:
    """Load and validate the dataset, then return the ready controller."""
    dataset = load_dataset(cfg)
    validation = DataValidator().validate(dataset)
    log.info(f"Validation: {validation['stats']}")
    controller = build_controller(dataset, cfg)
    return controller, validation
