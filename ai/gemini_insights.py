"""
ai/gemini_insights.py
---------------------
Uses Google Gemini to write short spending commentary from a user's
transaction history.

Responsibilities:
    - Compact the history into a small JSON sample to keep prompts cheap.
    - Ask for three concise, actionable bullet points.
    - Never raise: API failures come back as a fixed notice.
"""

import json
from typing import Optional

import google.generativeai as genai

from config import GEMINI_API_KEY, GEMINI_MODEL, INSIGHTS_SAMPLE_SIZE
from models.transaction import Transaction
from utils.logger import get_logger

logger = get_logger(__name__)

# Configure the Gemini client once at module level
genai.configure(api_key=GEMINI_API_KEY)

_model = genai.GenerativeModel(GEMINI_MODEL)

NO_INSIGHTS = "• No insights available at the moment."
INSIGHTS_UNAVAILABLE = (
    "• Unable to generate AI insights. Please check your API key or internet connection."
)

_PROMPT = """Analyze the following financial transaction history.
Provide 3 concise, actionable, and slightly witty financial insights or advice
bullet points based on spending patterns.
Format the output as plain text: one insight per line, each line starting with "• ".
Do not use markdown or HTML.

Data: {data}
"""


def summarize_for_prompt(transactions: list[Transaction], limit: int = INSIGHTS_SAMPLE_SIZE) -> list[dict]:
    """The first `limit` transactions reduced to date/type/amount/category."""
    return [
        {
            "date": t.day.isoformat(),
            "type": t.type.value,
            "amount": round(t.amount, 2),
            "category": t.category.value,
        }
        for t in transactions[:limit]
    ]


def generate_financial_insights(transactions: list[Transaction], model: Optional[object] = None) -> str:
    """
    Ask Gemini for spending commentary.

    Args:
        transactions: The user's collection, newest first.
        model: Override for the GenerativeModel (used by tests).

    Returns:
        Bullet-point text. On any API error a fixed notice is returned instead.
    """
    prompt = _PROMPT.format(data=json.dumps(summarize_for_prompt(transactions)))
    try:
        response = (model or _model).generate_content(
            prompt,
            generation_config=genai.GenerationConfig(
                temperature=0.7,
                max_output_tokens=400,
            ),
        )
        text = (response.text or "").strip()
        logger.info(f"Gemini returned {len(text)} characters of insights")
        return text or NO_INSIGHTS
    except Exception as e:
        logger.error(f"Gemini API error: {e}")
        return INSIGHTS_UNAVAILABLE
