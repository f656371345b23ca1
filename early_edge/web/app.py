"""
HTTP surface for the dashboard.

Serves chart data, rendered charts and simulator results as JSON / PNG
for a browser front end.
"""

import logging

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from early_edge.dashboard.controller import DashboardController
from early_edge.dashboard.metrics import get_spec
from early_edge.dashboard.renderer import ChartRenderer

logger = logging.getLogger(__name__)


def create_app(controller: DashboardController, renderer: ChartRenderer | None = None) -> Flask:
    """Build the Flask app around an already-started controller."""
    app = Flask(__name__)
    CORS(app)
    renderer = renderer or ChartRenderer()

    @app.before_request
    def log_request():
        logger.info(f"Request: {request.method} {request.path}")
        if request.args:
            logger.debug(f"Query args: {request.args.to_dict()}")

    @app.errorhandler(ValueError)
    def bad_request(e):
        logger.warning(f"Rejected {request.path}: {e}")
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.route('/')
    def index():
        return jsonify({
            "status": "ok",
            "message": "Early Edge dashboard API",
            "metrics": controller.metrics(),
        })

    @app.route('/health')
    def health():
        return jsonify({"status": "ok", "records": controller.dataset.n_records})

    @app.route('/api/metrics')
    def list_metrics():
        return jsonify({
            "status": "ok",
            "metrics": [
                {"id": m, "title": get_spec(m).title} for m in controller.metrics()
            ],
        })

    @app.route('/api/metrics/<metric>')
    def metric_stats(metric):
        view = controller.select_metric(metric)
        return jsonify({"status": "ok", **view.to_dict()})

    @app.route('/api/metrics/<metric>/chart.png')
    def metric_chart(metric):
        view = controller.select_metric(metric)
        return Response(renderer.to_png(view), mimetype="image/png")

    @app.route('/api/predict')
    def predict():
        gold = _number_arg("gold", float, 0.0)
        kills = _number_arg("kills", int, 0)
        first_dragon = _number_arg("first_dragon", int, 0)
        result = controller.simulate(gold, kills, first_dragon)
        logger.info(f"Simulator: gold={gold}, kills={kills}, first_dragon={first_dragon} -> {result.display}")
        return jsonify({"status": "ok", **result.to_dict()})

    return app


def _number_arg(name: str, cast, default):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Query parameter '{name}' must be a number, got '{raw}'") from None
    if cast is int:
        if not value.is_integer():
            raise ValueError(f"Query parameter '{name}' must be an integer, got '{raw}'")
        return int(value)
    return value
