"""Compliance analysis and regional insights generated with Gemini.

Both operations always return text: generated output when the service is
reachable, otherwise a fixed fallback string.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable

import structlog

from plot_insights.core.models import Plot

from .config import load_ai_config
from .context import build_compliance_prompt, build_region_prompt, summarize_plots
from .gemini_client import ClientHandle, Configured, create_handle, generate_text

logger = structlog.get_logger(__name__)

ANALYSIS_DISABLED_TEXT = "AI analysis is currently disabled due to missing or invalid configuration."
ANALYSIS_UNRECOGNIZED_TEXT = "Analysis generated. (Text format not recognized.)"
ANALYSIS_UNAVAILABLE_TEXT = "Analysis unavailable at the moment. Please check later."
REGION_FALLBACK_TEXT = "Critical monitoring suggested for payment defaults and land utility."


class InsightClient:
    """Builds prompts from plot data and returns assessment text."""

    def __init__(self, handle: ClientHandle) -> None:
        self._handle = handle

    @property
    def handle(self) -> ClientHandle:
        return self._handle

    @property
    def enabled(self) -> bool:
        return isinstance(self._handle, Configured)

    async def analyze_plot_compliance(self, plot: Plot) -> str:
        prompt = build_compliance_prompt(plot)

        handle = self._handle
        if not isinstance(handle, Configured):
            return ANALYSIS_DISABLED_TEXT

        try:
            response = await generate_text(handle, prompt)
        except Exception as exc:
            logger.exception("ai-analysis-error", plot_id=plot.id, error=str(exc))
            return ANALYSIS_UNAVAILABLE_TEXT

        text = _extract_text(response)
        if text is None:
            logger.warning("ai-response-unrecognized", plot_id=plot.id)
            return ANALYSIS_UNRECOGNIZED_TEXT
        return text

    async def generate_region_insight(self, plots: Iterable[Plot]) -> str:
        stats = summarize_plots(plots)
        prompt = build_region_prompt(stats)

        handle = self._handle
        if not isinstance(handle, Configured):
            return REGION_FALLBACK_TEXT

        try:
            response = await generate_text(handle, prompt)
        except Exception as exc:
            logger.exception("ai-insight-error", plots=stats.plot_count, error=str(exc))
            return REGION_FALLBACK_TEXT

        text = _extract_text(response)
        if text is None:
            logger.warning("ai-response-unrecognized", plots=stats.plot_count)
            return REGION_FALLBACK_TEXT
        return text


def _extract_text(response: Any) -> str | None:
    # google-genai exposes `.text` as a property; it is None when no text part exists.
    try:
        text = response.text
    except (AttributeError, ValueError):
        return None
    if isinstance(text, str):
        return text
    return None


@lru_cache(maxsize=1)
def get_default_client() -> InsightClient:
    """Returns the process-wide client, creating it on first use."""

    return InsightClient(create_handle(load_ai_config()))


def reset_default_client() -> None:
    get_default_client.cache_clear()


async def analyze_plot_compliance(plot: Plot) -> str:
    return await get_default_client().analyze_plot_compliance(plot)


async def generate_region_insight(plots: Iterable[Plot]) -> str:
    return await get_default_client().generate_region_insight(plots)
