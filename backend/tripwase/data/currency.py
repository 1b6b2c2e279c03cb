"""Currency utilities: static conversion and display formatting."""

# Static exchange rates to USD (can be updated periodically)
EXCHANGE_RATES_TO_USD: dict[str, float] = {
    "USD": 1.0,
    "EUR": 1.18,
    "GBP": 1.37,
    "DOP": 0.017,
    "CAD": 0.74,
    "MXN": 0.058,
    "JPY": 0.0067,
    "AUD": 0.65,
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$", "EUR": "€", "GBP": "£", "DOP": "RD$",
    "CAD": "CA$", "MXN": "MX$", "JPY": "¥", "AUD": "A$",
}


def convert_to_usd(amount: float, from_currency: str) -> float:
    """Convert an amount to USD using static exchange rates."""
    rate = EXCHANGE_RATES_TO_USD.get(from_currency, 1.0)
    return round(amount * rate, 2)


def convert_from_usd(amount: float, to_currency: str) -> float:
    """Convert a USD amount to another currency using static exchange rates."""
    rate = EXCHANGE_RATES_TO_USD.get(to_currency, 1.0)
    if rate == 0:
        return amount
    return round(amount / rate, 2)


def convert_currency(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert between any two known currencies, pivoting through USD.

    Unknown currencies convert at 1.0.
    """
    if from_currency == to_currency:
        return amount
    return convert_from_usd(convert_to_usd(amount, from_currency), to_currency)


def format_price(amount: float, currency: str = "USD") -> str:
    """Format a price with currency symbol for display."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    return f"{symbol}{round(amount):,}"
