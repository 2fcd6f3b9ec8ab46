# core/utils.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CURRENCY_SYMBOLS = {
    "EUR": "€",
    "RON": "RON",
}


def format_price(price: Union[Decimal, float, int, str], currency: str = "EUR") -> str:
    """
    Format an amount the way the ro-RO locale prints currency:
    dot thousands separator, comma decimals, symbol after a no-break space.
    format_price(1234.5) -> '1.234,50 €'
    """
    if currency not in CURRENCY_SYMBOLS:
        raise ValueError(f"Unsupported currency: {currency}")

    amount = Decimal(str(price)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    integer_part, _, fraction = f"{amount:,.2f}".partition(".")
    return f"{integer_part.replace(',', '.')},{fraction}\u00a0{CURRENCY_SYMBOLS[currency]}"
