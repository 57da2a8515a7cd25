"""Prompt construction from plot data."""

from __future__ import annotations

from typing import Iterable

from plot_insights.core.models import AggregateStats, Plot

CURRENCY = "₹"


def summarize_plots(plots: Iterable[Plot]) -> AggregateStats:
    return AggregateStats.from_plots(plots)


def build_compliance_prompt(plot: Plot) -> str:
    return (
        "Analyze the following industrial plot for potential compliance issues based on its data.\n"
        f"Plot ID: {plot.id}\n"
        f"Company: {plot.company_name}\n"
        f"Area Allocated: {format_number(plot.area_allocated)} sq.m\n"
        f"Area Currently Occupied: {format_number(plot.area_current)} sq.m\n"
        f"Status: {plot.status}\n"
        f"Violations Flagged: {', '.join(plot.violations)}\n"
        f"Risk Score: {format_number(plot.risk_score)}\n"
        f"Outstanding Dues: {CURRENCY}{format_number(plot.dues)}\n"
        "\n"
        "Provide a concise official assessment including:\n"
        "1. Nature of violation (if any)\n"
        "2. Estimated financial impact\n"
        "3. Recommended legal action\n"
        "4. Urgency level\n"
    )


def build_region_prompt(stats: AggregateStats) -> str:
    return (
        "System: Act as an industrial planning consultant for CSIDC.\n"
        "Data Summary:\n"
        f"- Total Plots: {stats.plot_count}\n"
        f"- Plots with Violations: {stats.violation_count}\n"
        f"- Total Outstanding Revenue: {CURRENCY}{format_number(stats.total_dues)}\n"
        "\n"
        "Provide a 2-sentence strategic insight for the regional manager.\n"
    )


def format_number(value: float) -> str:
    """Renders integral floats without a trailing ``.0``."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
