"""
Tests for AI insights: the single-flight guard and the Gemini wrapper.
"""

import asyncio
from datetime import timedelta
from types import SimpleNamespace

import pytest

from ai.gemini_insights import (
    INSIGHTS_UNAVAILABLE,
    NO_INSIGHTS,
    generate_financial_insights,
    summarize_for_prompt,
)
from conftest import TODAY, tx
from models.app_state import AppState
from services.insights_service import EMPTY_HISTORY, InsightsService
from utils.errors import InsightsBusyError


class StubModel:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate_content(self, prompt, **kwargs):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


class TestInsightsService:
    """Tests for InsightsService.request()."""

    def test_empty_history_skips_the_model(self):
        calls = []
        service = InsightsService(generate=lambda txs: calls.append(txs) or "x")
        state = AppState()
        result = asyncio.run(service.request(state, []))
        assert result == EMPTY_HISTORY
        assert state.insights == EMPTY_HISTORY
        assert calls == []

    def test_stores_result_and_clears_flag(self, sample):
        service = InsightsService(generate=lambda txs: f"• {len(txs)} transactions")
        state = AppState()
        assert asyncio.run(service.request(state, sample)) == "• 3 transactions"
        assert state.insights == "• 3 transactions"
        assert not state.insights_loading

    def test_refuses_while_in_flight(self, sample):
        service = InsightsService(generate=lambda txs: "never")
        state = AppState(insights="• earlier", insights_loading=True)
        with pytest.raises(InsightsBusyError):
            asyncio.run(service.request(state, sample))
        assert state.insights == "• earlier"

    def test_second_concurrent_request_is_refused(self, sample):
        service = InsightsService(generate=lambda txs: "• done")
        state = AppState()

        async def both():
            return await asyncio.gather(
                service.request(state, sample),
                service.request(state, sample),
                return_exceptions=True,
            )

        first, second = asyncio.run(both())
        assert first == "• done"
        assert isinstance(second, InsightsBusyError)
        assert not state.insights_loading

    def test_flag_cleared_when_generator_fails(self, sample):
        def boom(txs):
            raise RuntimeError("down")

        state = AppState()
        with pytest.raises(RuntimeError):
            asyncio.run(InsightsService(generate=boom).request(state, sample))
        assert not state.insights_loading


class TestGeminiInsights:
    """Tests for the Gemini wrapper with a stubbed model."""

    def test_returns_model_text(self, sample):
        model = StubModel(text="• Spend less on fun\n")
        assert generate_financial_insights(sample, model=model) == "• Spend less on fun"
        assert '"category": "Groceries"' in model.prompts[0]

    def test_empty_response(self, sample):
        assert generate_financial_insights(sample, model=StubModel(text="")) == NO_INSIGHTS

    def test_api_error_becomes_notice(self, sample):
        model = StubModel(error=RuntimeError("quota"))
        assert generate_financial_insights(sample, model=model) == INSIGHTS_UNAVAILABLE

    def test_prompt_sample_is_capped(self):
        history = [tx(i + 1, day=TODAY - timedelta(days=i)) for i in range(80)]
        compact = summarize_for_prompt(history, limit=50)
        assert len(compact) == 50
        assert compact[0] == {"date": "2024-05-20", "type": "expense", "amount": 1, "category": "Other"}
