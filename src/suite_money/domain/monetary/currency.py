from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import ClassVar

from suite_money.utils.decimal_tools import round_to_scale

logger = logging.getLogger(__name__)

MAX_MINOR_UNITS = 18


class CurrencyType(Enum):
    """Kind of asset a currency denotes."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class Currency:
    """Describes a currency: its code, how many minor units it has and how amounts look.

    Two currencies are equal when their codes are equal. All other fields (and the concrete
    class, e.g. `LocaleCurrency`) are ignored for equality and hashing.

    Attributes:
        code (str): Upper-case currency code (e.g., "USD", "BTC").
        minor_units (int): Fraction digits of one unit (0-18), e.g. 2 for USD, 0 for JPY.
        name (str): Display name.
        currency_type (CurrencyType): FIAT, CRYPTO or COMMODITY.
        symbol (str | None): Display symbol (e.g., "$").
        separator (str | None): Decimal separator between whole and fraction digits.
        delimiter (str | None): Grouping separator between thousands.
    """

    __slots__ = ("_code", "_minor_units", "_name", "_currency_type", "_symbol", "_separator", "_delimiter")

    # Code -> Currency, filled by `currency_registry` at import
    _registry: ClassVar[dict[str, Currency]] = {}

    # region Init

    def __init__(
        self,
        code: str,
        minor_units: int,
        name: str,
        currency_type: CurrencyType = CurrencyType.FIAT,
        symbol: str | None = None,
        separator: str | None = None,
        delimiter: str | None = None,
    ):
        """Create a currency descriptor.

        Args:
            code: Currency code; surrounding whitespace is dropped and letters are upper-cased.
            minor_units: Fraction digits, 0 to `MAX_MINOR_UNITS`.
            name: Display name.
            currency_type: Kind of asset.
            symbol: Display symbol; None when the currency has none.
            separator: Decimal separator; "." is used for display when None.
            delimiter: Grouping separator; no grouping when None.

        Raises:
            ValueError: If $code, $minor_units, $name or the separators are invalid.
            TypeError: If $currency_type is not a `CurrencyType`.
        """
        # Raise: code identifies the currency
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"Cannot create `Currency` because $code ('{code}') is empty or not a string")

        # Raise: minor units must be a whole number of digits in the supported range
        if isinstance(minor_units, bool) or not isinstance(minor_units, int) or not 0 <= minor_units <= MAX_MINOR_UNITS:
            raise ValueError(f"Cannot create `Currency` because $minor_units ({minor_units!r}) is not an int in 0..{MAX_MINOR_UNITS}")

        # Raise: name is shown to users
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Cannot create `Currency` because $name ('{name}') is empty or not a string")

        # Raise: currency type must be the enum, not its string value
        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"Cannot create `Currency` because $currency_type ({currency_type!r}) is not a CurrencyType")

        # Raise: separator and delimiter must differ, otherwise parsing is ambiguous
        if separator is not None and separator == delimiter:
            raise ValueError(f"Cannot create `Currency` because $separator and $delimiter are both '{separator}'")

        self._code = code.strip().upper()
        self._minor_units = minor_units
        self._name = name.strip()
        self._currency_type = currency_type
        self._symbol = symbol
        self._separator = separator
        self._delimiter = delimiter

    # endregion

    # region Properties

    @property
    def code(self) -> str:
        return self._code

    @property
    def minor_units(self) -> int:
        return self._minor_units

    @property
    def name(self) -> str:
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        return self._currency_type

    @property
    def symbol(self) -> str | None:
        return self._symbol

    @property
    def separator(self) -> str | None:
        return self._separator

    @property
    def delimiter(self) -> str | None:
        return self._delimiter

    @property
    def is_fiat(self) -> bool:
        return self._currency_type is CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        return self._currency_type is CurrencyType.CRYPTO

    @property
    def is_commodity(self) -> bool:
        return self._currency_type is CurrencyType.COMMODITY

    # endregion

    # region Registry

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Make $currency available to `Currency.from_str` under its code.

        Raises:
            ValueError: If the code is taken and $overwrite is False.
            TypeError: If $currency is not a Currency.
        """
        # Raise: only descriptors can be registered
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Currency.register` because $currency ({currency!r}) is not a Currency")

        existing = cls._registry.get(currency.code)
        if existing is not None:
            # Raise: replacing a registered currency must be explicit
            if not overwrite:
                raise ValueError(f"Cannot call `Currency.register` because code '{currency.code}' already exists; pass overwrite=True to replace it")
            logger.debug(f"Replacing registered Currency {existing!r} with {currency!r}")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Return the registered currency for $code (case-insensitive).

        Raises:
            ValueError: If no currency is registered under $code.
            TypeError: If $code is not a string.
        """
        # Raise: codes are strings
        if not isinstance(code, str):
            raise TypeError(f"Cannot call `Currency.from_str` because $code ({code!r}) is not a string")

        normalized = code.strip().upper()
        currency = cls._registry.get(normalized)

        # Raise: unknown code
        if currency is None:
            raise ValueError(f"Cannot call `Currency.from_str` because code '{normalized}' was not found in registry (known: {sorted(cls._registry)})")

        return currency

    # endregion

    # region Formatting

    def format_amount(self, value: Decimal) -> str:
        """Format $value for display, e.g. "$1,234.50" or "1.234,50 EUR".

        The value is rounded (half-even) to $minor_units. The symbol is used as prefix when
        present, otherwise the code is appended as suffix.
        """
        rounded = round_to_scale(value, self._minor_units)
        if not rounded.is_finite():
            return str(rounded)

        grouping = "," if self._delimiter is not None else ""
        body = format(rounded.copy_abs(), f"{grouping}.{self._minor_units}f")
        # Swap through a placeholder so "." and "," can trade places
        body = body.replace(",", "\x00").replace(".", self._separator or ".").replace("\x00", self._delimiter or "")
        sign = "-" if rounded.is_signed() and not rounded.is_zero() else ""

        if self._symbol:
            return f"{sign}{self._symbol}{body}"
        return f"{sign}{body} {self._code}"

    def parse_amount(self, text: str) -> Decimal | None:
        """Parse a display string produced for this currency.

        Only text that carries the symbol or the code is read with this currency's separators;
        anything else returns None so plain numbers like "12.5" keep their locale-free meaning.
        Strips the symbol, the code and grouping delimiters, then normalizes the decimal
        separator to ".". Returns None when the rest is not a finite number or the grouping
        is malformed (e.g. "1.2.3 TND").
        """
        if not self._mentions_currency(text):
            return None

        cleaned = text.strip()
        if self._symbol:
            cleaned = cleaned.replace(self._symbol, "")
        cleaned = cleaned.replace(self._code, "")
        cleaned = "".join(cleaned.split())

        if self._delimiter:
            whole = cleaned.split(self._separator)[0] if self._separator else cleaned
            if not _is_valid_grouping(whole.lstrip("+-"), self._delimiter):
                return None
            cleaned = cleaned.replace(self._delimiter, "")
        if self._separator and self._separator != ".":
            cleaned = cleaned.replace(self._separator, ".")

        try:
            result = Decimal(cleaned)
        except (InvalidOperation, ValueError):
            return None

        return result if result.is_finite() else None

    def _mentions_currency(self, text: str) -> bool:
        if not isinstance(text, str):
            return False
        return (bool(self._symbol) and self._symbol in text) or self._code in text

    # endregion

    def __eq__(self, other) -> bool:
        # Identity is the code alone
        if not isinstance(other, Currency):
            return False
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._code}', {self._minor_units}, '{self._name}', {self._currency_type})"


def _is_valid_grouping(whole: str, delimiter: str) -> bool:
    """Tell whether integer digits use $delimiter only between groups of three (e.g. "1.234.567")."""
    if delimiter not in whole:
        return True
    groups = whole.split(delimiter)
    return 1 <= len(groups[0]) <= 3 and all(len(group) == 3 for group in groups[1:])
