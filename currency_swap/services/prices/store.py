from __future__ import annotations

"""Session-scoped price store.

Owns the normalized price set and the fetch state (loading / error) that the
presentation layer shows while prices are not yet available. The swap form
reads prices through this store and never fetches on its own.

Refresh ordering:
    Each refresh() takes a generation number before awaiting the feed. When
    the await returns, only the newest generation may publish; an older
    response arriving late is dropped. There is no cancellation, so the last
    trigger wins.
"""
import logging
from typing import Iterable, List, Mapping, Optional, Protocol, Tuple

from currency_swap.core.errors import NetworkError
from currency_swap.models.prices import PriceSet, Quote
from .normalizer import normalize

logger = logging.getLogger("currency_swap.store")

FETCH_ERROR_MESSAGE = "Failed to fetch prices"


class SupportsFetch(Protocol):
    async def fetch(self) -> List[Quote]: ...


class PriceStore:
    def __init__(self, client: Optional[SupportsFetch] = None):
        self._client = client
        self._prices: PriceSet = {}
        self._generation = 0
        self.is_loading = True
        self.error: Optional[str] = None

    # State -----------------------------------------------------
    @property
    def prices(self) -> Mapping[str, float]:
        return self._prices

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def status(self) -> str:
        if self.is_loading:
            return "loading"
        if self.is_error:
            return "error"
        return "ready"

    def currencies(self) -> List[str]:
        """Symbols offered by the currency picker."""
        return sorted(self._prices)

    def entries(self) -> List[Tuple[str, float]]:
        return list(self._prices.items())

    # Updates ---------------------------------------------------
    def load(self, quotes: Iterable[Quote]) -> PriceSet:
        """Normalize and publish quotes synchronously."""
        self._prices = normalize(quotes)
        self.error = None
        self.is_loading = False
        return self._prices

    async def refresh(self) -> None:
        if self._client is None:
            raise RuntimeError("PriceStore has no feed client configured")
        self._generation += 1
        generation = self._generation
        self.is_loading = True
        try:
            quotes = await self._client.fetch()
        except NetworkError as e:
            if generation != self._generation:
                logger.info("discarding superseded refresh failure", extra={"generation": generation})
                return
            logger.warning("price refresh failed: %s", e)
            self.error = FETCH_ERROR_MESSAGE
            return
        finally:
            # only the newest refresh may end the loading state
            if generation == self._generation:
                self.is_loading = False
        if generation != self._generation:
            logger.info("discarding superseded refresh result", extra={"generation": generation})
            return
        self.load(quotes)
        logger.info(
            "prices refreshed",
            extra={"quotes": len(quotes), "symbols": len(self._prices)},
        )
