from __future__ import annotations

import math
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# symbol -> single authoritative price, one entry per symbol
PriceSet = Dict[str, float]


class Quote(BaseModel):
    """A single (symbol, price) pair as reported by the feed.

    The feed names the symbol field `currency`; other fields are ignored.
    Prices are not range-checked here: a zero, negative or missing price is
    kept (missing becomes NaN) and rejected later by the rate calculator.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    symbol: str = Field(..., alias="currency", min_length=1)
    price: float = math.nan

    @field_validator("price", mode="before")
    @classmethod
    def missing_price_is_nan(cls, v: Optional[float]) -> float:
        return math.nan if v is None else v


class PriceEntry(BaseModel):
    currency: str
    price: Optional[float]

    @classmethod
    def from_price(cls, symbol: str, price: float) -> "PriceEntry":
        # JSON has no NaN/inf; unusable prices are reported as null
        return cls(currency=symbol, price=price if math.isfinite(price) else None)


class PricesOut(BaseModel):
    status: str
    error: Optional[str] = None
    prices: list[PriceEntry] = []


class RateOut(BaseModel):
    from_currency: str
    to_currency: str
    rate: float
