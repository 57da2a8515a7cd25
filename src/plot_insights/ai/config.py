"""Environment-based configuration for the Gemini integration."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

DEFAULT_MODEL = "gemini-3-flash-preview"


@dataclass(frozen=True, slots=True)
class AiConfig:
    api_key: str
    model: str = DEFAULT_MODEL


_API_KEY_VARS = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")

_SUPPORTED_ENV_KEYS = {
    *_API_KEY_VARS,
    "PLOT_INSIGHTS_MODEL",
}


def _load_dotenv_if_present() -> None:
    """Best-effort .env loader.

    Rules:
    - Only loads known keys used by this project.
    - Never overwrites variables already present in os.environ.
    - Searches in CWD and (when installed editable) the project root.
    """

    if (os.getenv("PLOT_INSIGHTS_DISABLE_DOTENV") or "").strip().lower() in {"1", "true", "yes", "on"}:
        return

    candidates: list[Path] = [Path.cwd() / ".env"]

    try:
        # .../src/plot_insights/ai/config.py -> project root is parents[3]
        project_root = Path(__file__).resolve().parents[3]
        candidates.append(project_root / ".env")
    except IndexError:
        pass

    dotenv_path = next((p for p in candidates if p.is_file()), None)
    if dotenv_path is None:
        return

    try:
        lines = dotenv_path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        # Never block startup due to an unreadable .env.
        return

    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        if key not in _SUPPORTED_ENV_KEYS:
            continue
        if key in os.environ and os.environ[key].strip():
            continue
        value = value.strip().strip('"').strip("'")
        if value:
            os.environ[key] = value


def load_ai_config() -> AiConfig | None:
    """Loads AI config from environment.

    API key: `API_KEY`, then `GEMINI_API_KEY`, then `GOOGLE_API_KEY`.
    Model: `PLOT_INSIGHTS_MODEL` (default: "gemini-3-flash-preview").

    Returns None when no API key is set; callers treat that as AI disabled.
    """

    _load_dotenv_if_present()

    api_key = ""
    for name in _API_KEY_VARS:
        api_key = (os.getenv(name) or "").strip()
        if api_key:
            break

    if not api_key:
        return None

    model = (os.getenv("PLOT_INSIGHTS_MODEL") or "").strip() or DEFAULT_MODEL
    return AiConfig(api_key=api_key, model=model)
