"""Saving generated insights to files."""

from .exporter import ExportFormat, InsightExporter, InsightReport

__all__ = ["ExportFormat", "InsightExporter", "InsightReport"]
