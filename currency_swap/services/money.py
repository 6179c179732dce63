"""Money / display helpers.

Rate arithmetic stays in plain floats; only values rendered for display go
through here.
"""

from __future__ import annotations
import math
from decimal import Context, Decimal, ROUND_HALF_UP

# wide enough for any finite float at any supported number of places
_DISPLAY_CONTEXT = Context(prec=400)


def format_amount(value: float, places: int = 6) -> str:
    """Render with a fixed number of decimals, e.g. 50 -> '50.000000'."""
    if not math.isfinite(value):
        return str(value)
    quantum = Decimal(1).scaleb(-places)
    return str(
        Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_DISPLAY_CONTEXT)
    )
