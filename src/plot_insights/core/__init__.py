"""Core data models."""

from .models import AggregateStats, Plot, load_plots

__all__ = ["AggregateStats", "Plot", "load_plots"]
