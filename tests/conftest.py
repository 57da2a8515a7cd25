"""Shared fixtures: sample plots and fake Gemini sessions.

The fake session mirrors the small part of `google.genai.Client` used by the
package: `client.aio.models.generate_content(...)`.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from plot_insights.core.models import Plot


class FakeModels:
    def __init__(self, response=None, error: BaseException | None = None) -> None:
        self.calls: list[dict] = []
        self._response = response
        self._error = error

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return self._response


class FakeSession:
    def __init__(self, models: FakeModels) -> None:
        self.models = models
        self.aio = SimpleNamespace(models=models)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setenv("PLOT_INSIGHTS_DISABLE_DOTENV", "1")
    for name in ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY", "PLOT_INSIGHTS_MODEL"):
        monkeypatch.delenv(name, raising=False)

    from plot_insights.ai.insights import reset_default_client

    reset_default_client()
    yield
    reset_default_client()


@pytest.fixture
def make_session():
    def _make(response=None, error: BaseException | None = None) -> FakeSession:
        return FakeSession(FakeModels(response=response, error=error))

    return _make


@pytest.fixture
def text_response():
    def _make(text):
        return SimpleNamespace(text=text)

    return _make


@pytest.fixture
def sample_plot() -> Plot:
    return Plot(
        id="P-101",
        company_name="Raipur Steel Works",
        area_allocated=5000,
        area_current=6200,
        status="Encroached",
        violations=("Encroachment", "Unauthorized construction"),
        risk_score=82,
        dues=125000,
    )


@pytest.fixture
def region_plots() -> list[Plot]:
    return [
        Plot(id="A", dues=100, violations=("x",)),
        Plot(id="B", dues=250, violations=()),
        Plot(id="C", dues=0, violations=("y", "z")),
    ]
