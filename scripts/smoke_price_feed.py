"""Smoke script for the live price feed.

Demonstrates:
 1. One fetch against the configured feed URL.
 2. Raw quote count vs. distinct symbols after normalization.
 3. A sample conversion through the swap form controller.

NOTE: This is a lightweight diagnostic and not a formal test. Needs network.
"""

import asyncio
import os
import sys
from pprint import pprint


async def run():
    from currency_swap.core.config import get_settings
    from currency_swap.services.session import build_session

    session = build_session(get_settings())
    await session.store.refresh()
    out = {"status": session.store.status, "error": session.store.error}
    if session.store.status == "ready":
        symbols = session.store.currencies()
        out["symbols"] = len(symbols)
        out["first"] = symbols[:5]
        form = session.form
        form.set_from_currency("ETH")
        form.set_to_currency("USD")
        form.set_from_amount("1")
        form.submit()
        out["eth_to_usd"] = form.state.model_dump()
    pprint(out)


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    asyncio.run(run())
