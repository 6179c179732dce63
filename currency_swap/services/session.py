"""Per-session wiring: one price store and the swap form that borrows from it.

Built by the app factory and kept on `app.state`; routers reach it through the
`get_session` dependency so tests can swap in their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from currency_swap.core.config import Settings
from currency_swap.services.prices.feed import PriceFeedClient
from currency_swap.services.prices.store import PriceStore
from currency_swap.services.swap_form import SwapFormController


@dataclass
class SwapSession:
    store: PriceStore
    form: SwapFormController


def build_session(settings: Settings, client: Optional[PriceFeedClient] = None) -> SwapSession:
    client = client or PriceFeedClient(
        str(settings.price_feed_url), timeout=settings.http_timeout_seconds
    )
    store = PriceStore(client)
    return SwapSession(store=store, form=SwapFormController(store))


def get_session(request: Request) -> SwapSession:
    return request.app.state.session


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings
