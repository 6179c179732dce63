from __future__ import annotations

"""Remote price feed client.

The feed is a JSON array of objects carrying at least `currency` and `price`:

    [{"currency": "BLUR", "date": "2023-08-29T07:10:24.000Z", "price": 0.208}, ...]

Symbols repeat when the feed reports several quotes for the same currency;
deduplication is the normalizer's job, not this client's.
"""
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from currency_swap.core.errors import NetworkError
from currency_swap.models.prices import Quote
from currency_swap.services.http_client import HttpError, get_json

logger = logging.getLogger("currency_swap.feed")

DEFAULT_FEED_URL = "https://interview.switcheo.com/prices.json"


class PriceFeedClient:
    def __init__(
        self,
        url: str = DEFAULT_FEED_URL,
        *,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = str(url)
        self.timeout = timeout
        self._client = client

    async def fetch(self) -> List[Quote]:
        """Fetch the raw quote list once. Raises NetworkError on any failure."""
        logger.debug("fetching prices", extra={"url": self.url})
        try:
            data = await get_json(self.url, timeout=self.timeout, client=self._client)
        except HttpError as e:
            logger.warning("price feed request failed: %s", e)
            raise NetworkError(str(e)) from e
        return self._parse(data)

    def _parse(self, data: object) -> List[Quote]:
        if not isinstance(data, list):
            raise NetworkError(
                f"malformed price feed body: expected a list, got {type(data).__name__}"
            )
        try:
            quotes = [Quote.model_validate(item) for item in data]
        except ValidationError as e:
            raise NetworkError(f"malformed price feed entry: {e}") from e
        logger.info("fetched %d quotes", len(quotes), extra={"url": self.url})
        return quotes
