"""
Report generation for the dashboard data.

Writes every metric's win-rate table to JSON and text, with one chart
image per metric.
"""

import json
import logging
from pathlib import Path
from datetime import datetime

from early_edge.core.schema import Metric

log = logging.getLogger(__name__)


def generate_report(
    controller,
    output_dir: str = "reports",
    include_plots: bool = True,
    renderer=None,
    validation: dict | None = None,
) -> str:
    """Generate the win-rate report for all metrics.

    Returns path to the generated JSON file.
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    views = [controller.select_metric(m) for m in Metric]

    report_data = {
        "source": controller.dataset.source,
        "n_records": controller.dataset.n_records,
        "overall_winrate": controller.overall_winrate,
        "metrics": {v.metric.value: v.to_dict() for v in views},
        "validation": validation or {},
    }
    report_data["generated_at"] = datetime.now().isoformat()

    json_path = out / f"winrate_report_{timestamp}.json"
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(report_data, f, indent=2, ensure_ascii=False)

    txt_path = out / f"winrate_report_{timestamp}.txt"
    with open(txt_path, "w", encoding="utf-8") as f:
        f.write(format_text_report(controller, views))

    if include_plots:
        if renderer is None:
            from early_edge.dashboard.renderer import ChartRenderer
            renderer = ChartRenderer()
        for v in views:
            renderer.save(v, str(out / f"{v.metric.value}_{timestamp}.png"))

    log.info(f"Report saved to {json_path}")
    return str(json_path)


def format_text_report(controller, views) -> str:
    """Format metric tables as readable text."""
    lines = [
        "=" * 70,
        "EARLY EDGE — Early-Game Statistics vs Win Rate",
        "=" * 70,
        "",
        f"Dataset: {controller.dataset.source or '<in-memory>'}",
        f"Records: {controller.dataset.n_records}",
        f"Overall win rate: {controller.overall_winrate:.1%}",
    ]
    for v in views:
        lines += [
            "",
            "-" * 40,
            v.title,
            "-" * 40,
            f"{'Group':<20} {'Win rate':>10} {'Games':>8}",
        ]
        for r in v.rows:
            lines.append(f"{r.label:<20} {r.winrate:>10.1%} {r.count:>8}")
    lines += ["", "=" * 70]
    return "\n".join(lines)

