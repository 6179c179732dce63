from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from currency_swap.models.prices import PriceEntry, PricesOut
from currency_swap.services.prices.store import PriceStore
from currency_swap.services.session import SwapSession, get_session

"""Prices router: feed state and the currency list for the picker.

Endpoints:
    - GET  /prices             -> status (loading|ready|error), error, prices
    - POST /prices/refresh     -> fetch the feed again, return the new state
    - GET  /prices/currencies  -> sorted symbols
"""

router = APIRouter(prefix="/prices", tags=["prices"])


def get_store(session: SwapSession = Depends(get_session)) -> PriceStore:
    return session.store


def _prices_out(store: PriceStore) -> PricesOut:
    return PricesOut(
        status=store.status,
        error=store.error,
        prices=[PriceEntry.from_price(symbol, price) for symbol, price in store.entries()],
    )


@router.get("", response_model=PricesOut, summary="Current price set and feed state")
async def list_prices(store: PriceStore = Depends(get_store)):
    return _prices_out(store)


@router.post("/refresh", response_model=PricesOut, summary="Fetch the price feed again")
async def refresh_prices(store: PriceStore = Depends(get_store)):
    await store.refresh()
    return _prices_out(store)


@router.get("/currencies", response_model=List[str], summary="Symbols available for swapping")
async def list_currencies(store: PriceStore = Depends(get_store)):
    return store.currencies()
