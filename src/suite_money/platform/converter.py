from __future__ import annotations

import logging

from suite_money.domain.conversion.protocol import ConvertStrategy
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import ExchangeRateNotFoundError
from suite_money.domain.monetary.money import Money
from suite_money.platform.providers.exchange_rate_provider import ExchangeRateProvider

logger = logging.getLogger(__name__)


class CurrencyConverter:
    """Converts Money using rates looked up from an `ExchangeRateProvider`.

    Args:
        provider: Source of exchange rates.
        strategy: Conversion policy passed to `Money.convert_to`; None means the default one.
    """

    __slots__ = ("_provider", "_strategy")

    def __init__(self, provider: ExchangeRateProvider, strategy: ConvertStrategy | None = None) -> None:
        self._provider = provider
        self._strategy = strategy

    @property
    def provider(self) -> ExchangeRateProvider:
        return self._provider

    def convert(self, money: Money, target_currency: Currency) -> Money:
        """Convert $money into $target_currency at the provider's current rate.

        Money already in $target_currency is returned unchanged.

        Raises:
            ExchangeRateNotFoundError: If the provider knows no rate for the pair.
            ConversionError: If the strategy rejects the conversion.
        """
        if money.currency == target_currency:
            return money

        rate = self._provider.get_rate(money.currency.code, target_currency.code)

        # Raise: nothing to convert with
        if rate is None:
            raise ExchangeRateNotFoundError(f"Cannot call `convert` because no exchange rate is known for {money.currency.code}/{target_currency.code}")

        result = money.convert_to(target_currency, rate, self._strategy)
        logger.debug(f"CurrencyConverter converted {money} to {result} (rate {rate})")
        return result
