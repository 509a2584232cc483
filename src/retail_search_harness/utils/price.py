"""
Price parsing for displayed product prices.
"""

import re
from dataclasses import dataclass

from retail_search_harness.exceptions.search import PriceFormatError

_NON_NUMERIC = re.compile(r"[^0-9.]")


@dataclass(frozen=True)
class Price:
    """
    A displayed price and its numeric value.
    
    Attributes:
        text: Trimmed text as shown on the page (e.g. "$1,299.99")
        amount: Numeric value with the currency symbol and separators removed
    """
    text: str
    amount: float


def parse_price(text: str | None, currency: str = "$") -> Price:
    """
    Parse a displayed price string.

    Every character other than digits and "." is dropped before the amount
    is read, so a range such as "$12.99 - $24.99" is rejected rather than
    read as its lower bound.

    Args:
        text: Raw text content of the price element
        currency: Symbol the price must start with

    Returns:
        Parsed Price

    Raises:
        PriceFormatError: If the text is empty, has the wrong currency,
            or does not hold a positive amount
    """
    if not text or not text.strip():
        raise PriceFormatError("Price element is empty", text=text)
    
    trimmed = text.strip()
    if not trimmed.startswith(currency):
        raise PriceFormatError(
            f"Invalid price format: {trimmed}. Expected price to start with {currency}",
            text=trimmed,
        )
    
    numeric = _NON_NUMERIC.sub("", trimmed)
    try:
        amount = float(numeric)
    except ValueError:
        raise PriceFormatError(f"Invalid price value: {trimmed}", text=trimmed)
    
    if amount <= 0:
        raise PriceFormatError(f"Invalid price value: {trimmed}", text=trimmed)
    
    return Price(text=trimmed, amount=amount)
