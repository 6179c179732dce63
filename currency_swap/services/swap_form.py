"""Swap form controller: field edits, submit validation and conversion.

States:
    EDITING   - initial; any field edit returns here and clears the error.
    SUBMITTED - a submit produced a fresh to_amount.

A submit that fails validation or hits an unknown currency sets the error
message and stays in EDITING without touching the previous to_amount. The
controller never fetches prices; it reads them from the injected source at
submit time.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping, Optional, Protocol, Union

from currency_swap.core.errors import CurrencyNotFoundError
from currency_swap.models.swap import FormPhase, FormState
from currency_swap.services.prices.calculator import ConversionResult, compute_conversion

logger = logging.getLogger("currency_swap.swap_form")

MISSING_FIELDS_MESSAGE = "Please select currencies and fill in all fields"
OUT_OF_RANGE_MESSAGE = "Amount is too large to convert"


class SupportsPrices(Protocol):
    @property
    def prices(self) -> Mapping[str, float]: ...


def parse_amount(raw: Union[str, float, int, None]) -> Optional[float]:
    """Parse amount input the way the form field does.

    Blank, unparseable, zero and non-finite input all mean "empty" (None).
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    else:
        value = float(raw)
    if value == 0 or not math.isfinite(value):
        return None
    return value


class SwapFormController:
    def __init__(self, price_source: SupportsPrices):
        self._price_source = price_source
        self.state = FormState()

    @property
    def phase(self) -> FormPhase:
        return self.state.phase

    # Field edits -----------------------------------------------
    def _edited(self) -> None:
        self.state.error = None
        self.state.phase = FormPhase.EDITING

    def set_from_currency(self, symbol: Optional[str]) -> None:
        self.state.from_currency = symbol or ""
        self._edited()

    def set_to_currency(self, symbol: Optional[str]) -> None:
        self.state.to_currency = symbol or ""
        self._edited()

    def set_from_amount(self, raw: Union[str, float, int, None]) -> None:
        self.state.from_amount = parse_amount(raw)
        self._edited()

    def reset(self) -> None:
        self.state = FormState()

    # Submit ----------------------------------------------------
    def _is_complete(self) -> bool:
        s = self.state
        return bool(s.from_amount and s.from_amount > 0 and s.from_currency and s.to_currency)

    def submit(self) -> Optional[ConversionResult]:
        """Validate and convert. Returns the conversion on success, else None."""
        s = self.state
        if not self._is_complete():
            s.error = MISSING_FIELDS_MESSAGE
            s.phase = FormPhase.EDITING
            return None
        try:
            result = compute_conversion(
                s.from_amount, s.from_currency, s.to_currency, self._price_source.prices
            )
        except CurrencyNotFoundError as e:
            logger.debug("conversion failed", extra={"currency": e.symbol})
            s.error = str(e)
            s.phase = FormPhase.EDITING
            return None
        if not math.isfinite(result.converted_amount):
            logger.debug("conversion overflowed", extra={"rate": result.rate})
            s.error = OUT_OF_RANGE_MESSAGE
            s.phase = FormPhase.EDITING
            return None
        s.to_amount = result.converted_amount
        s.error = None
        s.phase = FormPhase.SUBMITTED
        return result
