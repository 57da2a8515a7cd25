"""Command-line interface for generating plot assessments."""

from __future__ import annotations

import asyncio
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

import structlog

from plot_insights.ai import get_default_client
from plot_insights.ai.context import summarize_plots
from plot_insights.ai.gemini_client import Configured
from plot_insights.core import load_plots
from plot_insights.reporting import ExportFormat, InsightExporter, InsightReport
from plot_insights.shared import configure_logging


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="plot-insights",
        description="Compliance assessments and regional insights for industrial plots.",
    )
    parser.add_argument(
        "plots",
        type=Path,
        help="Path to a JSON file with plot records",
    )
    parser.add_argument(
        "--plot-id",
        help="Analyze a single plot instead of the whole region",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Also write the result to this file",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Format of the --output file (default: json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def _run(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    if not args.plots.exists():
        logger.error("plots-file-not-found", path=str(args.plots))
        return 1

    try:
        plots = load_plots(args.plots)
    except (OSError, ValueError) as exc:
        logger.error("plots-load-failed", path=str(args.plots), error=str(exc))
        return 1

    client = get_default_client()
    handle = client.handle
    model = handle.model if isinstance(handle, Configured) else None

    if args.plot_id is not None:
        plot = next((p for p in plots if p.id == args.plot_id), None)
        if plot is None:
            logger.error("plot-not-found", plot_id=args.plot_id)
            return 1
        logger.info("analyzing-plot", plot_id=plot.id)
        text = asyncio.run(client.analyze_plot_compliance(plot))
        report = InsightReport(kind="plot", subject=plot.id, text=text, model=model, ai_enabled=client.enabled)
    else:
        logger.info("generating-region-insight", plots=len(plots))
        text = asyncio.run(client.generate_region_insight(plots))
        report = InsightReport(
            kind="region",
            subject="region",
            text=text,
            model=model,
            ai_enabled=client.enabled,
            stats=summarize_plots(plots),
        )

    print(text)

    if args.output is not None:
        fmt = ExportFormat(args.format)
        output_path = InsightExporter().export(report, args.output, fmt)
        logger.info("report-written", report=str(output_path))

    return 0


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(level=10 if args.verbose else 20)
    return _run(args)


if __name__ == "__main__":
    sys.exit(main())
