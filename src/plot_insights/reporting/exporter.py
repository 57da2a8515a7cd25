"""Export of generated insights (JSON/text)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from plot_insights.core.models import AggregateStats


class ExportFormat(str, Enum):
    """Supported report formats."""

    JSON = "json"
    TEXT = "text"


@dataclass(slots=True)
class InsightReport:
    """A generated insight together with the context it was produced in."""

    kind: str
    subject: str
    text: str
    model: Optional[str] = None
    ai_enabled: bool = False
    stats: Optional[AggregateStats] = None
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class InsightExporter:
    """Writes insight reports to JSON or plain text files."""

    def export(self, report: InsightReport, destination: Path, fmt: ExportFormat) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)

        if fmt is ExportFormat.JSON:
            payload = self._build_json_payload(report)
            destination.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        elif fmt is ExportFormat.TEXT:
            destination.write_text(report.text.rstrip("\n") + "\n", encoding="utf-8")
        else:  # pragma: no cover - future formats
            raise ValueError(f"Unsupported export format: {fmt}")

        return destination

    def _build_json_payload(self, report: InsightReport) -> Dict[str, object]:
        return {
            "kind": report.kind,
            "subject": report.subject,
            "created_at": report.created_at,
            "model": report.model,
            "ai_enabled": report.ai_enabled,
            "stats": self._stats_to_dict(report.stats) if report.stats else None,
            "text": report.text,
        }

    @staticmethod
    def _stats_to_dict(stats: AggregateStats) -> Dict[str, object]:
        return {
            "plot_count": stats.plot_count,
            "total_dues": stats.total_dues,
            "violation_count": stats.violation_count,
        }
