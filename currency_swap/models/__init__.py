"""Pydantic domain models for the currency swap service."""

from .prices import PriceSet, Quote, PriceEntry, PricesOut, RateOut
from .swap import FormPhase, FormState, FormStateOut, SwapFieldsIn

__all__ = [
    "PriceSet",
    "Quote",
    "PriceEntry",
    "PricesOut",
    "RateOut",
    "FormPhase",
    "FormState",
    "FormStateOut",
    "SwapFieldsIn",
]
