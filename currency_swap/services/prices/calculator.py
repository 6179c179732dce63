from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from currency_swap.core.errors import CurrencyNotFoundError

"""Exchange rate arithmetic over a normalized price set.

Both prices are quoted in the same unit, so the rate from A to B is simply
price(A) / price(B). No rounding happens here; display formatting belongs to
the HTTP layer.
"""


@dataclass(frozen=True)
class ConversionResult:
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float


def _usable_price(symbol: str, prices: Mapping[str, float]) -> float:
    price: Optional[float] = prices.get(symbol)
    # zero, missing and NaN are all unusable
    if not price or math.isnan(price):
        raise CurrencyNotFoundError(symbol)
    return price


def get_exchange_rate(from_currency: str, to_currency: str, prices: Mapping[str, float]) -> float:
    """Units of `to_currency` per one unit of `from_currency`."""
    from_price = _usable_price(from_currency, prices)
    to_price = _usable_price(to_currency, prices)
    return from_price / to_price


def convert_amount(
    amount: float, from_currency: str, to_currency: str, prices: Mapping[str, float]
) -> float:
    return amount * get_exchange_rate(from_currency, to_currency, prices)


def compute_conversion(
    amount: float, from_currency: str, to_currency: str, prices: Mapping[str, float]
) -> ConversionResult:
    rate = get_exchange_rate(from_currency, to_currency, prices)
    return ConversionResult(
        amount=amount,
        from_currency=from_currency,
        to_currency=to_currency,
        rate=rate,
        converted_amount=amount * rate,
    )
