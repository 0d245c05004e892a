from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from suite_money.utils.decimal_tools import DecimalLike

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency
    from suite_money.domain.monetary.money import Money


# region Interface


class ConvertStrategy(Protocol):
    """Policy that turns Money in one currency into Money in another currency.

    `Money.convert_to` delegates to a strategy, so fee-charging or differently rounding
    conversions can be plugged in without changing Money itself. The exchange rate is an
    already resolved value; fetching it is the caller's job.
    """

    def convert(self, money: Money, target_currency: Currency, rate: DecimalLike) -> Money:
        """Convert $money into $target_currency using $rate.

        Args:
            money: Amount to convert.
            target_currency: Currency of the result.
            rate: Units of $target_currency per one unit of $money.currency.

        Returns:
            Converted amount in $target_currency.

        Raises:
            ConversionError: If the conversion is rejected (e.g. same currency, invalid rate).
        """
        ...


# endregion
