from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from currency_swap.core.config import Settings
from currency_swap.core.errors import NetworkError
from currency_swap.main import create_app
from currency_swap.models.prices import Quote
from currency_swap.services.prices.store import PriceStore
from currency_swap.services.session import SwapSession
from currency_swap.services.swap_form import SwapFormController


class FakeFeed:
    """Feed stub returning canned quotes, or raising NetworkError when `fail` is set."""

    def __init__(self, quotes: Optional[List[Quote]] = None, fail: bool = False):
        self.quotes = quotes or []
        self.fail = fail
        self.calls = 0

    async def fetch(self) -> List[Quote]:
        self.calls += 1
        if self.fail:
            raise NetworkError("feed down")
        return list(self.quotes)


def q(symbol: str, price: float) -> Quote:
    return Quote(currency=symbol, price=price)


@pytest.fixture
def sample_quotes() -> List[Quote]:
    return [
        q("ETH", 1645.93),
        q("USD", 1.0),
        q("USDC", 1.0),
        q("USDC", 0.99),
        q("ATOM", 7.19),
        q("WBTC", 26002.82),
    ]


@pytest.fixture
def feed(sample_quotes) -> FakeFeed:
    return FakeFeed(sample_quotes)


@pytest.fixture
def store(feed) -> PriceStore:
    return PriceStore(feed)


@pytest.fixture
def settings() -> Settings:
    return Settings(fetch_on_startup=False, debug=False)


@pytest.fixture
def session(store) -> SwapSession:
    return SwapSession(store=store, form=SwapFormController(store))


@pytest.fixture
def client(settings, session) -> TestClient:
    app = create_app(settings_override=settings, session=session)
    return TestClient(app)
