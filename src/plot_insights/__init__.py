"""plot-insights package initialisation."""

__all__ = [
    "ai",
    "core",
    "reporting",
    "shared",
]
