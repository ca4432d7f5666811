"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── Gemini AI ─────────────────────────────────────────────
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
INSIGHTS_SAMPLE_SIZE: int = int(os.getenv("INSIGHTS_SAMPLE_SIZE", "50"))

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "finsight")
DB_USER: str = os.getenv("DB_USER", "finsight_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# ── Security ──────────────────────────────────────────────
_raw_ids = os.getenv("ALLOWED_USER_IDS", "")
ALLOWED_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Rate Limiting ─────────────────────────────────────────
RATE_LIMIT_MESSAGES: int = int(os.getenv("RATE_LIMIT_MESSAGES", "30"))
RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

# ── Payments (Razorpay) ───────────────────────────────────
RAZORPAY_KEY_ID: str = os.getenv("RAZORPAY_KEY_ID", "")
RAZORPAY_KEY_SECRET: str = os.getenv("RAZORPAY_KEY_SECRET", "")

# ── Dashboard ─────────────────────────────────────────────
DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "USD").strip().upper()
DEFAULT_THEME: str = os.getenv("DEFAULT_THEME", "dark").strip().lower()
DAILY_WINDOW_DAYS: int = int(os.getenv("DAILY_WINDOW_DAYS", "60"))
EMPTY_WINDOW_DAYS: int = int(os.getenv("EMPTY_WINDOW_DAYS", "7"))


def validate_config() -> None:
    """
    Check the loaded values against the closed enumerations and lookup tables.

    Raises:
        ValueError: On the first invalid setting found.
    """
    from models.app_state import Theme
    from models.currency import CURRENCIES, EXCHANGE_RATES, is_supported

    missing = [c.code for c in CURRENCIES if c.code not in EXCHANGE_RATES]
    if missing:
        raise ValueError(f"Currencies without an exchange rate: {', '.join(missing)}")
    if not is_supported(DEFAULT_CURRENCY):
        raise ValueError(f"Unsupported DEFAULT_CURRENCY: {DEFAULT_CURRENCY}")
    if DEFAULT_THEME not in {t.value for t in Theme}:
        raise ValueError(f"DEFAULT_THEME must be 'light' or 'dark', got {DEFAULT_THEME!r}")
    if DAILY_WINDOW_DAYS < 1 or EMPTY_WINDOW_DAYS < 1:
        raise ValueError("Chart window lengths must be positive.")
