#!/usr/bin/env python3
"""
Early Edge CLI.

Usage:
    python main.py chart --metric gold --out reports/gold.png
    python main.py predict --gold 1500 --kills 2 --first-dragon 1
    python main.py report
    python main.py audit
    python main.py serve --port 5000
"""

import sys
import logging
import argparse
from pathlib import Path

from early_edge.core.schema import Metric

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("early_edge")


def _start(args):
    from early_edge.orchestration.config import load_config
    from early_edge.orchestration.startup import start

    cfg = load_config(args.config)
    if args.dataset:
        cfg["paths"]["dataset"] = args.dataset
    controller, validation = start(cfg)
    return cfg, controller, validation


def cmd_chart(args):
    from early_edge.orchestration.startup import build_renderer

    cfg, controller, _ = _start(args)
    view = controller.select_metric(args.metric)
    for tip in view.tooltips:
        log.info(tip.replace("\n", " | "))
    log.info(view.baseline_label)

    out = args.out or str(Path(cfg["paths"].get("reports", "reports")) / f"{view.metric.value}.png")
    build_renderer(cfg).save(view, out)


def cmd_predict(args):
    from early_edge.orchestration.config import load_config
    from early_edge.models.win_prob import WinProbabilityModel
    from early_edge.dashboard.captions import caption_for

    # The simulator needs no dataset.
    cfg = load_config(args.config)
    model = WinProbabilityModel.from_config(cfg.get("model"))
    pct = model.predict_percent(args.gold, args.kills, args.first_dragon)
    band, caption = caption_for(pct)
    print(f"{pct}%  [{band.value}]")
    print(caption)


def cmd_report(args):
    from early_edge.dashboard.report import generate_report
    from early_edge.orchestration.startup import build_renderer

    cfg, controller, validation = _start(args)
    out = args.out or cfg["paths"].get("reports", "reports")
    path = generate_report(
        controller, out, include_plots=not args.no_plots,
        renderer=build_renderer(cfg), validation=validation,
    )
    log.info(f"Report: {path}")


def cmd_audit(args):
    _, controller, validation = _start(args)
    log.info(f"Records: {controller.dataset.n_records}")
    log.info(f"Overall win rate: {controller.overall_winrate:.2%}")
    if not validation["is_clean"]:
        sys.exit(1)


def cmd_serve(args):
    from early_edge.orchestration.startup import build_renderer
    from early_edge.web.app import create_app

    cfg, controller, _ = _start(args)
    server = cfg.get("server", {})
    port = args.port or server.get("port", 5000)
    app = create_app(controller, build_renderer(cfg))
    app.run(host=server.get("host", "0.0.0.0"), port=port, debug=False)


def main():
    p = argparse.ArgumentParser(description="Early Edge CLI")
    p.add_argument("--config", default="configs/default.yaml")
    p.add_argument("--dataset", default=None, help="Override paths.dataset")
    sub = p.add_subparsers(dest="command")

    ch = sub.add_parser("chart")
    ch.add_argument("--metric", choices=[m.value for m in Metric], default="gold")
    ch.add_argument("--out", default=None)

    pr = sub.add_parser("predict")
    pr.add_argument("--gold", type=float, default=0.0)
    pr.add_argument("--kills", type=int, default=0)
    pr.add_argument("--first-dragon", type=int, choices=[0, 1], default=0)

    rp = sub.add_parser("report")
    rp.add_argument("--out", default=None)
    rp.add_argument("--no-plots", action="store_true")

    sub.add_parser("audit")

    sv = sub.add_parser("serve")
    sv.add_argument("--port", type=int, default=None)

    args = p.parse_args()
    if args.command == "chart":
        cmd_chart(args)
    elif args.command == "predict":
        cmd_predict(args)
    elif args.command == "report":
        cmd_report(args)
    elif args.command == "audit":
        cmd_audit(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        p.print_help()


if __name__ == "__main__":
    main()
