"""
models/currency.py
------------------
Static currency table: display metadata per ISO code and approximate
exchange rates expressed as units of that currency per 1 USD (the pivot).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """A supported display currency."""
    code: str
    symbol: str
    name: str


PIVOT_CURRENCY = "USD"
DEFAULT_SYMBOL = "$"

CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "$", "United States Dollar"),
    Currency("EUR", "€", "Euro"),
    Currency("GBP", "£", "British Pound Sterling"),
    Currency("JPY", "¥", "Japanese Yen"),
    Currency("CAD", "C$", "Canadian Dollar"),
    Currency("AUD", "A$", "Australian Dollar"),
    Currency("INR", "₹", "Indian Rupee"),
    Currency("CNY", "¥", "Chinese Yuan"),
    Currency("CHF", "Fr", "Swiss Franc"),
    Currency("NZD", "NZ$", "New Zealand Dollar"),
    Currency("BRL", "R$", "Brazilian Real"),
    Currency("RUB", "₽", "Russian Ruble"),
    Currency("KRW", "₩", "South Korean Won"),
    Currency("SGD", "S$", "Singapore Dollar"),
    Currency("MXN", "Mex$", "Mexican Peso"),
    Currency("SAR", "﷼", "Saudi Riyal"),
    Currency("ZAR", "R", "South African Rand"),
    Currency("TRY", "₺", "Turkish Lira"),
    Currency("SEK", "kr", "Swedish Krona"),
    Currency("NOK", "kr", "Norwegian Krone"),
    Currency("HKD", "HK$", "Hong Kong Dollar"),
    Currency("IDR", "Rp", "Indonesian Rupiah"),
    Currency("MYR", "RM", "Malaysian Ringgit"),
    Currency("PHP", "₱", "Philippine Peso"),
    Currency("THB", "฿", "Thai Baht"),
    Currency("VND", "₫", "Vietnamese Dong"),
    Currency("PLN", "zł", "Polish Zloty"),
    Currency("DKK", "kr", "Danish Krone"),
    Currency("HUF", "Ft", "Hungarian Forint"),
    Currency("CZK", "Kč", "Czech Koruna"),
    Currency("ILS", "₪", "Israeli New Shekel"),
    Currency("CLP", "CLP$", "Chilean Peso"),
    Currency("AED", "د.إ", "United Arab Emirates Dirham"),
    Currency("COP", "COL$", "Colombian Peso"),
    Currency("TWD", "NT$", "New Taiwan Dollar"),
    Currency("ARS", "ARS$", "Argentine Peso"),
    Currency("EGP", "E£", "Egyptian Pound"),
    Currency("PKR", "₨", "Pakistani Rupee"),
    Currency("NGN", "₦", "Nigerian Naira"),
    Currency("BDT", "৳", "Bangladeshi Taka"),
)

# Approximate rates for display and pricing only, not settlement.
EXCHANGE_RATES: dict[str, float] = {
    "USD": 1,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 150,
    "CAD": 1.36,
    "AUD": 1.52,
    "INR": 83.5,
    "CNY": 7.2,
    "CHF": 0.90,
    "NZD": 1.65,
    "BRL": 5.1,
    "RUB": 92,
    "KRW": 1350,
    "SGD": 1.35,
    "MXN": 16.8,
    "SAR": 3.75,
    "ZAR": 18.5,
    "TRY": 32,
    "SEK": 10.8,
    "NOK": 10.9,
    "HKD": 7.8,
    "IDR": 16000,
    "MYR": 4.7,
    "PHP": 57,
    "THB": 36,
    "VND": 25000,
    "PLN": 3.95,
    "DKK": 6.9,
    "HUF": 360,
    "CZK": 23.5,
    "ILS": 3.7,
    "CLP": 950,
    "AED": 3.67,
    "COP": 3900,
    "TWD": 32,
    "ARS": 870,
    "EGP": 47,
    "PKR": 278,
    "NGN": 1300,
    "BDT": 110,
}

_BY_CODE: dict[str, Currency] = {c.code: c for c in CURRENCIES}


def get_currency(code: str) -> Currency | None:
    """Look up a currency by ISO code (case-insensitive)."""
    return _BY_CODE.get(code.strip().upper())


def is_supported(code: str) -> bool:
    return get_currency(code) is not None


def currency_symbol(code: str) -> str:
    """Symbol for a code, or ``$`` when the code is unknown."""
    currency = get_currency(code)
    return currency.symbol if currency else DEFAULT_SYMBOL


def rate_for(code: str) -> float:
    """Units of ``code`` per 1 USD; unknown codes use the identity rate."""
    return EXCHANGE_RATES.get(code.strip().upper(), 1)
