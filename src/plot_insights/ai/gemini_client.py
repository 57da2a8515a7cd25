"""Process-wide handle to the Gemini text-generation service.

The handle is either `Configured`, wrapping a `google.genai.Client`, or
`Disabled` when no credential is available or the client could not be built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import structlog
from google import genai
from google.genai import types

from .config import AiConfig

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Configured:
    session: Any
    model: str


@dataclass(frozen=True, slots=True)
class Disabled:
    reason: str


ClientHandle = Union[Configured, Disabled]


def create_handle(config: AiConfig | None) -> ClientHandle:
    """Builds the client handle. Never raises."""

    if config is None:
        logger.warning("ai-disabled", reason="API key not found. AI features are disabled.")
        return Disabled(reason="missing-api-key")

    try:
        session = genai.Client(api_key=config.api_key)
    except Exception as exc:
        logger.exception("ai-client-init-failed", error=str(exc))
        return Disabled(reason="client-init-failed")

    logger.info("ai-client-ready", model=config.model)
    return Configured(session=session, model=config.model)


def generation_config() -> types.GenerateContentConfig:
    """Request config with extended thinking turned off."""

    return types.GenerateContentConfig(thinking_config=types.ThinkingConfig(thinking_budget=0))


async def generate_text(handle: Configured, prompt: str) -> Any:
    """Issues exactly one generate_content request and returns the raw response."""

    return await handle.session.aio.models.generate_content(
        model=handle.model,
        contents=prompt,
        config=generation_config(),
    )
