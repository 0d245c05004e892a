from decimal import Decimal

import pytest

from suite_money.domain.conversion.normal_convert_strategy import NormalConvertStrategy
from suite_money.domain.monetary.currency_registry import EUR, JPY, USD
from suite_money.domain.monetary.errors import (
    ConversionError,
    MoneyError,
    NegativeExchangeRateError,
    SameCurrencyConversionError,
)
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding_mode import RoundingMode


class FeeConvertStrategy:
    """Converts normally, then charges a flat fee in the target currency."""

    def __init__(self, fee: Decimal):
        self.fee = fee

    def convert(self, money, target_currency, rate):
        return NormalConvertStrategy().convert(money, target_currency, rate).subtract(self.fee)


def test_convert_rounds_to_target_currency():
    result = Money("20", EUR).convert_to(USD, Decimal("1.1234"))
    assert result == Money("22.47", USD)
    assert result.currency == USD


def test_convert_to_currency_without_minor_units():
    assert Money("10.00", USD).convert_to(JPY, "149.555") == Money("1496", JPY)


def test_convert_keeps_rounding_mode():
    result = Money("0.25", USD, RoundingMode.DOWN).convert_to(EUR, Decimal("0.99"))
    assert result.amount == Decimal("0.24")
    assert result.rounding_mode == RoundingMode.DOWN


def test_strategy_can_be_called_directly():
    result = NormalConvertStrategy().convert(Money("20", EUR), USD, Decimal("1.1234"))
    assert result == Money("22.47", USD)


def test_same_currency_conversion_is_rejected():
    with pytest.raises(SameCurrencyConversionError):
        Money("20", EUR).convert_to(EUR, Decimal("1"))


@pytest.mark.parametrize("rate", [Decimal("0"), Decimal("-1.1"), "garbage", Decimal("NaN")])
def test_rate_that_is_not_positive_is_rejected(rate):
    with pytest.raises(NegativeExchangeRateError):
        Money("20", EUR).convert_to(USD, rate)


def test_conversion_errors_are_recoverable():
    assert issubclass(SameCurrencyConversionError, ConversionError)
    assert issubclass(NegativeExchangeRateError, ConversionError)
    assert issubclass(ConversionError, MoneyError)
    assert not issubclass(ConversionError, AssertionError)


def test_custom_strategy_is_used():
    result = Money("20", EUR).convert_to(USD, Decimal("1.1234"), FeeConvertStrategy(Decimal("1")))
    assert result == Money("21.47", USD)
