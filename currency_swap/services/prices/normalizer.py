"""Collapse duplicate feed quotes into one price per symbol.

Duplicates are folded with a sequential running average: each later quote is
averaged with the value stored so far, so for prices [10, 20, 30] the result is
((10 + 20) / 2 + 30) / 2 = 22.5, not the arithmetic mean 20. The feed has
always been consumed this way and rates computed elsewhere depend on it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from currency_swap.models.prices import PriceSet, Quote

logger = logging.getLogger("currency_swap.normalizer")


def normalize(quotes: Iterable[Quote]) -> PriceSet:
    prices: Dict[str, float] = {}
    seen = 0
    for quote in quotes:
        seen += 1
        stored = prices.get(quote.symbol)
        if stored is None:
            prices[quote.symbol] = quote.price
        else:
            prices[quote.symbol] = (stored + quote.price) / 2
    logger.debug("normalized %d quotes into %d symbols", seen, len(prices))
    return prices
