"""Tests for chart rendering and report export."""

import json

import matplotlib.pyplot as plt
import pytest

from early_edge.core.schema import Dataset
from early_edge.dashboard.controller import DashboardController
from early_edge.dashboard.renderer import ChartRenderer
from early_edge.dashboard.report import format_text_report, generate_report
from early_edge.ingestion.validator import DataValidator

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def controller(dataset):
    return DashboardController(dataset)


class TestChartRenderer:
    def test_render_bars(self, controller):
        view = controller.select_metric("gold")
        fig = ChartRenderer().render(view)
        try:
            ax = fig.axes[0]
            assert len(ax.patches) == 8
            heights = [p.get_height() for p in ax.patches]
            assert heights == [r.winrate for r in view.rows]
            assert ax.get_ylim() == (0.0, 1.0)
        finally:
            plt.close(fig)

    def test_baseline_line(self, controller):
        view = controller.select_metric("dragon")
        fig = ChartRenderer().render(view)
        try:
            ax = fig.axes[0]
            ys = [line.get_ydata()[0] for line in ax.get_lines()]
            assert view.overall_winrate in ys
            texts = [t.get_text() for t in ax.texts]
            assert view.baseline_label in texts
        finally:
            plt.close(fig)

    def test_figure_size_from_config(self, controller):
        view = controller.select_metric("towers")
        fig = ChartRenderer({"width": 400, "height": 200, "dpi": 100}).render(view)
        try:
            w, h = fig.get_size_inches()
            assert (w, h) == (4.0, 2.0)
        finally:
            plt.close(fig)

    def test_partial_margin_config(self):
        r = ChartRenderer({"margin": {"top": 10}})
        assert r.cfg["margin"]["top"] == 10
        assert r.cfg["margin"]["left"] == 60

    def test_save(self, controller, tmp_path):
        view = controller.select_metric("vision")
        path = ChartRenderer().save(view, str(tmp_path / "out" / "vision.png"))
        with open(path, "rb") as f:
            assert f.read(8) == PNG_MAGIC

    def test_to_png(self, controller):
        png = ChartRenderer().to_png(controller.select_metric("kills"))
        assert png.startswith(PNG_MAGIC)

    def test_empty_view(self):
        view = DashboardController(Dataset(records=())).select_metric("baron")
        assert ChartRenderer().to_png(view).startswith(PNG_MAGIC)


class TestReport:
    def test_text_report(self, controller):
        views = [controller.select_metric(m) for m in ("gold", "dragon")]
        text = format_text_report(controller, views)
        assert "Overall win rate: 50.0%" in text
        assert "0 ~ 1000" in text
        assert "Figure — Dragon Control vs Win Rate" in text

    def test_generate_report(self, controller, tmp_path):
        path = generate_report(controller, str(tmp_path), include_plots=True)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["n_records"] == 6
        assert set(data["metrics"]) == {"gold", "dragon", "baron", "towers", "kills", "vision"}
        assert len(data["metrics"]["gold"]["rows"]) == 8
        assert len(list(tmp_path.glob("*.png"))) == 6
        assert len(list(tmp_path.glob("*.txt"))) == 1

    def test_generate_report_with_validation(self, controller, tmp_path):
        validation = DataValidator().validate(controller.dataset)
        path = generate_report(controller, str(tmp_path), include_plots=False,
                               validation=validation)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["overall_winrate"] == pytest.approx(0.5)
        assert data["validation"]["stats"]["win_rate"] == 0.5
        assert data["validation"]["stats"]["records"] == 6

    def test_generate_report_no_plots(self, controller, tmp_path):
        generate_report(controller, str(tmp_path), include_plots=False,
                        validation={"is_clean": True})
        assert list(tmp_path.glob("*.png")) == []
