import math

import pytest

from currency_swap.core.errors import CurrencyNotFoundError, SwapServiceError
from currency_swap.services.prices.calculator import (
    compute_conversion,
    convert_amount,
    get_exchange_rate,
)

PRICES = {"ETH": 1645.93, "USD": 1.0, "ATOM": 7.19, "FROM": 2.0, "TO": 4.0}


@pytest.mark.parametrize("a,b", [("ETH", "USD"), ("ATOM", "ETH"), ("USD", "ATOM")])
def test_rates_are_reciprocal(a, b):
    product = get_exchange_rate(a, b, PRICES) * get_exchange_rate(b, a, PRICES)
    assert math.isclose(product, 1.0)


def test_rate_to_self_is_one():
    assert get_exchange_rate("ETH", "ETH", PRICES) == 1.0


def test_rate_is_price_ratio():
    assert get_exchange_rate("FROM", "TO", PRICES) == 0.5


def test_convert_round_trip():
    there = convert_amount(123.45, "ETH", "ATOM", PRICES)
    back = convert_amount(there, "ATOM", "ETH", PRICES)
    assert math.isclose(back, 123.45)


def test_convert_hundred_at_half_rate():
    assert convert_amount(100, "FROM", "TO", PRICES) == 50


def test_compute_conversion_carries_rate():
    result = compute_conversion(100, "FROM", "TO", PRICES)
    assert result.rate == 0.5
    assert result.converted_amount == 50
    assert (result.from_currency, result.to_currency) == ("FROM", "TO")


@pytest.mark.parametrize("a,b,missing", [("XYZ", "USD", "XYZ"), ("USD", "XYZ", "XYZ")])
def test_unknown_symbol_raises(a, b, missing):
    with pytest.raises(CurrencyNotFoundError) as exc:
        get_exchange_rate(a, b, PRICES)
    assert exc.value.symbol == missing
    assert isinstance(exc.value, SwapServiceError)


@pytest.mark.parametrize("bad", [0.0, math.nan])
def test_unusable_price_raises_instead_of_dividing(bad):
    prices = {"A": 1.0, "B": bad}
    with pytest.raises(CurrencyNotFoundError):
        get_exchange_rate("A", "B", prices)
    with pytest.raises(CurrencyNotFoundError):
        convert_amount(10, "B", "A", prices)
