import asyncio
from typing import List

import pytest

from conftest import FakeFeed, q
from currency_swap.models.prices import Quote
from currency_swap.services.prices.store import FETCH_ERROR_MESSAGE, PriceStore


def test_new_store_is_loading_and_empty():
    store = PriceStore(FakeFeed())
    assert store.status == "loading"
    assert store.prices == {}
    assert not store.is_error


def test_load_normalizes_synchronously(sample_quotes):
    store = PriceStore()
    store.load(sample_quotes)
    assert store.status == "ready"
    assert store.prices["USDC"] == pytest.approx(0.995)
    assert store.currencies() == ["ATOM", "ETH", "USD", "USDC", "WBTC"]
    assert store.entries()[0] == ("ETH", 1645.93)


@pytest.mark.asyncio
async def test_refresh_publishes_prices(store, feed):
    await store.refresh()
    assert feed.calls == 1
    assert store.status == "ready"
    assert set(store.prices) == {"ETH", "USD", "USDC", "ATOM", "WBTC"}


@pytest.mark.asyncio
async def test_failed_refresh_sets_error_and_keeps_prices(sample_quotes):
    feed = FakeFeed(sample_quotes)
    store = PriceStore(feed)
    await store.refresh()
    feed.fail = True

    await store.refresh()

    assert store.status == "error"
    assert store.error == FETCH_ERROR_MESSAGE
    assert store.prices["ETH"] == 1645.93


@pytest.mark.asyncio
async def test_successful_refresh_clears_previous_error(sample_quotes):
    feed = FakeFeed(sample_quotes, fail=True)
    store = PriceStore(feed)
    await store.refresh()
    assert store.is_error

    feed.fail = False
    await store.refresh()
    assert store.status == "ready"
    assert store.error is None


class GatedFeed:
    """Each fetch waits on its own event so tests control completion order."""

    def __init__(self, responses: List[List[Quote]]):
        self.responses = responses
        self.gates: List[asyncio.Event] = []

    async def fetch(self) -> List[Quote]:
        idx = len(self.gates)
        gate = asyncio.Event()
        self.gates.append(gate)
        await gate.wait()
        return self.responses[idx]


@pytest.mark.asyncio
async def test_later_refresh_supersedes_earlier_one():
    feed = GatedFeed([[q("A", 1)], [q("A", 2)]])
    store = PriceStore(feed)

    first = asyncio.create_task(store.refresh())
    await asyncio.sleep(0)
    second = asyncio.create_task(store.refresh())
    await asyncio.sleep(0)
    assert store.status == "loading"

    # newest response lands first, stale one arrives afterwards
    feed.gates[1].set()
    await second
    feed.gates[0].set()
    await first

    assert store.prices == {"A": 2}
    assert store.status == "ready"


@pytest.mark.asyncio
async def test_refresh_without_client_is_an_error():
    with pytest.raises(RuntimeError):
        await PriceStore().refresh()


class BrokenFeed:
    async def fetch(self) -> List[Quote]:
        raise ValueError("unexpected payload")


@pytest.mark.asyncio
async def test_unexpected_fetch_error_ends_loading():
    store = PriceStore(BrokenFeed())
    with pytest.raises(ValueError):
        await store.refresh()
    assert not store.is_loading
