"""Tests for insight report export."""

from __future__ import annotations

import json

from plot_insights.core.models import AggregateStats
from plot_insights.reporting import ExportFormat, InsightExporter, InsightReport


def _sample_report() -> InsightReport:
    return InsightReport(
        kind="region",
        subject="region",
        text="Dues are rising. Prioritise recovery.",
        model="gemini-3-flash-preview",
        ai_enabled=True,
        stats=AggregateStats(plot_count=3, total_dues=350, violation_count=2),
        created_at="2026-01-01T00:00:00+00:00",
    )


def test_export_json(tmp_path) -> None:
    destination = tmp_path / "out" / "report.json"

    path = InsightExporter().export(_sample_report(), destination, ExportFormat.JSON)

    assert path == destination
    data = json.loads(destination.read_text(encoding="utf-8"))
    assert data["kind"] == "region"
    assert data["model"] == "gemini-3-flash-preview"
    assert data["ai_enabled"] is True
    assert data["stats"] == {"plot_count": 3, "total_dues": 350, "violation_count": 2}
    assert data["text"] == "Dues are rising. Prioritise recovery."
    assert data["created_at"] == "2026-01-01T00:00:00+00:00"


def test_export_json_without_stats_keeps_rupee_sign(tmp_path) -> None:
    report = InsightReport(kind="plot", subject="P-1", text="Dues of ₹500 pending.")
    destination = tmp_path / "plot.json"

    InsightExporter().export(report, destination, ExportFormat.JSON)

    raw = destination.read_text(encoding="utf-8")
    assert "₹500" in raw
    data = json.loads(raw)
    assert data["stats"] is None
    assert data["ai_enabled"] is False


def test_export_text(tmp_path) -> None:
    destination = tmp_path / "report.txt"

    InsightExporter().export(_sample_report(), destination, ExportFormat.TEXT)

    assert destination.read_text(encoding="utf-8") == "Dues are rising. Prioritise recovery.\n"
