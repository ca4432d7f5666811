"""
services/insights_service.py
----------------------------
Runs AI insight requests, at most one in flight per user.
A request made while another is pending is refused, not queued.
"""

import asyncio
from typing import Callable, Optional

from ai.gemini_insights import generate_financial_insights
from models.app_state import AppState
from models.transaction import Transaction
from utils.errors import InsightsBusyError
from utils.logger import get_logger

logger = get_logger(__name__)

EMPTY_HISTORY = "• Please add some transactions first so I can analyze your spending habits!"


class InsightsService:
    """Guards the Gemini call with the per-user `insights_loading` flag."""

    def __init__(self, generate: Optional[Callable[[list[Transaction]], str]] = None):
        self.generate = generate or generate_financial_insights

    async def request(self, state: AppState, transactions: list[Transaction]) -> str:
        """
        Produce insights and store them on `state`.

        Raises:
            InsightsBusyError: If a request for this user is still running.
        """
        if state.insights_loading:
            raise InsightsBusyError("Insights are already being generated. Please wait.")
        if not transactions:
            state.insights = EMPTY_HISTORY
            return state.insights

        state.insights_loading = True
        try:
            # the Gemini SDK call blocks; keep the event loop free
            state.insights = await asyncio.to_thread(self.generate, transactions)
        finally:
            state.insights_loading = False
        return state.insights
