"""Gemini-backed assessments for industrial plots.

AI features are optional at runtime. Without an API key every operation
returns its fixed fallback text instead of calling the service.
"""

from .config import AiConfig, load_ai_config
from .gemini_client import ClientHandle, Configured, Disabled, create_handle
from .insights import (
    InsightClient,
    analyze_plot_compliance,
    generate_region_insight,
    get_default_client,
    reset_default_client,
)

__all__ = [
    "AiConfig",
    "ClientHandle",
    "Configured",
    "Disabled",
    "InsightClient",
    "analyze_plot_compliance",
    "create_handle",
    "generate_region_insight",
    "get_default_client",
    "load_ai_config",
    "reset_default_client",
]
