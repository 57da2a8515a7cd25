"""Data models for industrial plot records."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping


@dataclass(frozen=True, slots=True)
class Plot:
    """A single industrial land-allocation record."""

    id: str
    company_name: str = ""
    area_allocated: float = 0
    area_current: float = 0
    status: str = ""
    violations: tuple[str, ...] = field(default_factory=tuple)
    risk_score: float = 0
    dues: float = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Plot":
        """Builds a plot from camelCase or snake_case keys."""

        plot_id = data.get("id")
        if plot_id is None or str(plot_id).strip() == "":
            raise ValueError("Plot record is missing 'id'")

        violations = data.get("violations")
        if violations is None:
            violations = ()
        if not isinstance(violations, (list, tuple)) or not all(isinstance(v, str) for v in violations):
            raise ValueError(f"Plot {plot_id}: 'violations' must be a list of strings")

        return cls(
            id=str(plot_id),
            company_name=str(_pick(data, "companyName", "company_name", default="")),
            area_allocated=_number(plot_id, "areaAllocated", _pick(data, "areaAllocated", "area_allocated", default=0)),
            area_current=_number(plot_id, "areaCurrent", _pick(data, "areaCurrent", "area_current", default=0)),
            status=str(data.get("status") or ""),
            violations=tuple(violations),
            risk_score=_number(plot_id, "riskScore", _pick(data, "riskScore", "risk_score", default=0)),
            dues=_number(plot_id, "dues", _pick(data, "dues", default=0)),
        )


@dataclass(frozen=True, slots=True)
class AggregateStats:
    """Totals derived from a collection of plots."""

    plot_count: int = 0
    total_dues: float = 0
    violation_count: int = 0

    @classmethod
    def from_plots(cls, plots: Iterable[Plot]) -> "AggregateStats":
        plot_count = 0
        total_dues: float = 0
        violation_count = 0
        for plot in plots:
            plot_count += 1
            total_dues += plot.dues
            if len(plot.violations) > 0:
                violation_count += 1
        return cls(plot_count=plot_count, total_dues=total_dues, violation_count=violation_count)


def _number(plot_id: Any, name: str, value: Any) -> float:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Plot {plot_id}: '{name}' must be a number, got {type(value).__name__}")
    return value


def _pick(data: Mapping[str, Any], *keys: str, default: Any) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def load_plots(path: Path) -> list[Plot]:
    """Loads plots from a JSON file.

    Accepts either a top-level list of plot objects or an object with a
    ``plots`` list.
    """

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid plot data in {path}: {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("plots")
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of plots in {path}")

    plots: list[Plot] = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError(f"Plot entry must be an object, got {type(item).__name__}")
        plots.append(Plot.from_dict(item))
    return plots
