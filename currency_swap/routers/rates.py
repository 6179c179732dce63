import math

from fastapi import APIRouter, Depends, HTTPException, Query

from currency_swap.models.prices import RateOut
from currency_swap.services.prices.calculator import get_exchange_rate
from currency_swap.services.session import SwapSession, get_session

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=RateOut, summary="Exchange rate between two currencies")
async def get_rate(
    from_currency: str = Query(..., min_length=1),
    to_currency: str = Query(..., min_length=1),
    session: SwapSession = Depends(get_session),
):
    # CurrencyNotFoundError is rendered as 404 by the app's exception handler
    rate = get_exchange_rate(from_currency, to_currency, session.store.prices)
    if not math.isfinite(rate):
        raise HTTPException(status_code=422, detail="exchange rate out of range")
    return RateOut(from_currency=from_currency, to_currency=to_currency, rate=rate)
