from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from suite_money.domain.monetary import currency_registry  # noqa: F401  (registers predefined currencies)
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.locale_currency import LocaleCurrency
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding_mode import RoundingMode
from suite_money.utils.decimal_tools import DecimalLike

logger = logging.getLogger(__name__)

ENV_DEFAULT_CURRENCY = "SUITE_MONEY_DEFAULT_CURRENCY"
ENV_ROUNDING_MODE = "SUITE_MONEY_ROUNDING_MODE"
ENV_LOCALE = "SUITE_MONEY_LOCALE"


@dataclass(frozen=True)
class MoneySettings:
    """Explicit defaults for creating Money.

    Nothing in the package reads these settings implicitly; pass them to the code that
    creates Money.

    Attributes:
        default_currency_code: Code of a registered currency used by `money` and `zero`.
        rounding_mode: Rounding mode given to every Money created here.
        locale: Locale identifier for locale-backed currencies.
    """

    default_currency_code: str = "USD"
    rounding_mode: RoundingMode = RoundingMode.HALF_EVEN
    locale: str = "en_US"

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> MoneySettings:
        """Load settings from environment variables, reading a `.env` file first.

        Variables already present in the environment win over the `.env` file.

        Args:
            dotenv_path: Path of the `.env` file; None searches for one.

        Raises:
            ValueError: If the rounding mode variable names no known mode.
        """
        load_dotenv(dotenv_path)

        settings = cls(
            default_currency_code=os.getenv(ENV_DEFAULT_CURRENCY, cls.default_currency_code).upper().strip(),
            rounding_mode=RoundingMode.from_name(os.getenv(ENV_ROUNDING_MODE, cls.rounding_mode.name)),
            locale=os.getenv(ENV_LOCALE, cls.locale).strip(),
        )
        logger.info(f"Loaded MoneySettings: currency={settings.default_currency_code}, rounding={settings.rounding_mode.name}, locale={settings.locale}")
        return settings

    @property
    def default_currency(self) -> Currency:
        """Registered currency for $default_currency_code.

        Raises:
            ValueError: If the code is not registered.
        """
        return Currency.from_str(self.default_currency_code)

    def money(self, amount: DecimalLike) -> Money:
        """Create Money in the default currency with the configured rounding mode."""
        return Money(amount, self.default_currency, self.rounding_mode)

    def zero(self) -> Money:
        return Money.zero(self.default_currency, self.rounding_mode)

    def locale_currency(self) -> LocaleCurrency:
        """Currency associated with $locale, described with that locale's symbols.

        Raises:
            ValueError: If $locale is unknown or has no associated currency.
        """
        return LocaleCurrency(self.locale)
