from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    NumberFormatError,
    format_currency,
    get_currency_name,
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_territory_currencies,
    list_currencies,
    parse_decimal,
)

from suite_money.domain.monetary.currency import Currency, CurrencyType

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"


class LocaleCurrency(Currency):
    """Currency whose metadata and formatting come from a locale (Unicode CLDR via Babel).

    The currency code defaults to the one used in the locale's territory, so
    `LocaleCurrency("fr_TN")` is the Tunisian Dinar with 3 minor units. Pass $currency_code to
    describe another currency with the formatting conventions of $locale.

    Use `from_locale` / `from_code` when absence should be reported as None instead of raising.
    """

    __slots__ = ("_locale",)

    def __init__(self, locale: str | Locale = DEFAULT_LOCALE, currency_code: str | None = None):
        """Create a currency for $locale.

        Args:
            locale: Locale identifier (e.g., "en_US", "de_DE") or a Babel `Locale`.
            currency_code: ISO 4217 code; defaults to the currency of the locale's territory.

        Raises:
            ValueError: If $locale is unknown, has no associated currency, or $currency_code
                is not a known ISO 4217 code.
        """
        parsed_locale = _parse_locale(locale)

        code = currency_code.upper().strip() if currency_code is not None else _territory_currency(parsed_locale)

        # Raise: a locale like "en" has no territory and therefore no currency
        if code is None:
            raise ValueError(f"Cannot call `LocaleCurrency.__init__` because $locale ('{locale}') has no associated currency")

        # Raise: only ISO 4217 codes known to CLDR can be described
        if code not in list_currencies():
            raise ValueError(f"Cannot call `LocaleCurrency.__init__` because $currency_code ('{code}') is not a known ISO 4217 code")

        super().__init__(
            code=code,
            minor_units=get_currency_precision(code),
            name=get_currency_name(code, locale=parsed_locale),
            currency_type=CurrencyType.FIAT,
            symbol=get_currency_symbol(code, locale=parsed_locale),
            separator=get_decimal_symbol(parsed_locale),
            delimiter=get_group_symbol(parsed_locale),
        )
        self._locale = parsed_locale

    @property
    def locale(self) -> Locale:
        return self._locale

    # region Factory methods

    @classmethod
    def from_locale(cls, identifier: str) -> LocaleCurrency | None:
        """Create the currency associated with locale $identifier, or None if there is none."""
        try:
            return cls(identifier)
        except ValueError as e:
            logger.debug(f"No currency for $identifier '{identifier}': {e}")
            return None

    @classmethod
    def from_code(cls, code: str, locale: str | Locale = DEFAULT_LOCALE) -> LocaleCurrency | None:
        """Create the currency with ISO 4217 $code formatted for $locale, or None if $code is unknown."""
        if not isinstance(code, str) or not code.strip():
            return None

        try:
            return cls(locale, currency_code=code)
        except ValueError as e:
            logger.debug(f"No currency for $code '{code}': {e}")
            return None

    # endregion

    # region Formatting

    def format_amount(self, value: Decimal) -> str:
        """Format $value the way $locale displays amounts of this currency."""
        return format_currency(value, self.code, locale=self._locale)

    def parse_amount(self, text: str) -> Decimal | None:
        """Parse a locale-formatted amount such as "$1,204.50" or "1.204,50 €".

        Text without the symbol or code returns None, and grouping is checked strictly.
        """
        if not self._mentions_currency(text):
            return None

        cleaned = text.replace(self.symbol or "", "").replace(self.code, "")
        cleaned = "".join(cleaned.split())
        if not cleaned:
            return None

        try:
            result = parse_decimal(cleaned, locale=self._locale, strict=True)
        except (NumberFormatError, InvalidOperation, ValueError):
            return None

        return result if result.is_finite() else None

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._locale}', '{self.code}')"


def _parse_locale(locale: str | Locale) -> Locale:
    if isinstance(locale, Locale):
        return locale

    # Raise: identifier must name a locale known to CLDR
    try:
        return Locale.parse(locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ValueError(f"Cannot parse $locale ('{locale}') because it is not a known locale identifier") from e


def _territory_currency(locale: Locale) -> str | None:
    if not locale.territory:
        return None

    currencies = get_territory_currencies(locale.territory)
    return currencies[0] if currencies else None
