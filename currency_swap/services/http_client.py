from __future__ import annotations

"""Lightweight async HTTP JSON helper.

Single attempt per call: callers decide whether to try again. Every failure
mode (transport error, non-2xx status, undecodable body) surfaces as HttpError
so callers only have one exception type to translate.
"""
from typing import Any, Optional

import httpx


class HttpError(Exception):
    pass


async def get_json(
    url: str, *, timeout: float = 5.0, client: Optional[httpx.AsyncClient] = None
) -> Any:
    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                resp = await own_client.get(url, timeout=timeout)
        else:
            resp = await client.get(url, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPStatusError as e:
        raise HttpError(f"HTTP {e.response.status_code} for {url}") from e
    except (httpx.HTTPError, ValueError) as e:  # ValueError for JSON decode
        raise HttpError(f"Failed to fetch JSON from {url}: {e}") from e
