from __future__ import annotations

from typing import TYPE_CHECKING

from suite_money.domain.monetary.errors import NegativeExchangeRateError, SameCurrencyConversionError
from suite_money.utils.decimal_tools import DecimalLike, is_positive, to_decimal_or_nan

from .protocol import ConvertStrategy

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency
    from suite_money.domain.monetary.money import Money


class NormalConvertStrategy(ConvertStrategy):
    """Multiply by the exchange rate and round to the target currency's minor units."""

    # region Protocol ConvertStrategy

    def convert(self, money: Money, target_currency: Currency, rate: DecimalLike) -> Money:
        """Implements: ConvertStrategy.convert

        Raises:
            SameCurrencyConversionError: If $target_currency equals $money.currency.
            NegativeExchangeRateError: If $rate is not a number or is not > 0.
        """
        # Raise: converting into the same currency is meaningless
        if money.currency == target_currency:
            raise SameCurrencyConversionError(f"Cannot call `convert` because $target_currency ({target_currency}) is the same as $money.currency")

        # Raise: rate must be strictly positive
        rate_value = to_decimal_or_nan(rate)
        if not is_positive(rate_value):
            raise NegativeExchangeRateError(f"Cannot call `convert` because $rate ({rate}) must be > 0")

        # Uses target currency scale for rounding
        return money._multiply_into(rate_value, target_currency)

    # endregion
