from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from suite_money.domain.conversion.normal_convert_strategy import NormalConvertStrategy
from suite_money.domain.conversion.protocol import ConvertStrategy
from suite_money.domain.monetary import allocation
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatchError, InvalidAmountError
from suite_money.domain.monetary.rounding_mode import RoundingMode
from suite_money.utils.decimal_tools import (
    DECIMAL_LIKE_TYPES,
    DecimalLike,
    absolute,
    add_exact,
    divide_rounded,
    from_minor_units,
    is_negative,
    is_positive,
    is_zero,
    multiply_exact,
    one_minor_unit,
    parse_decimal,
    round_to_scale,
    subtract_exact,
    to_decimal_or_nan,
    to_minor_units,
)

logger = logging.getLogger(__name__)


class Money:
    """Exact amount of one currency, rounded to that currency's minor units.

    Money is an immutable value object. Its $amount is always rounded to
    $currency.minor_units using $rounding_mode (banker's rounding by default), and every
    operation returns a new, freshly rounded Money.

    Combining or ordering Money of different currencies is a programmer error and raises
    `CurrencyMismatchError`. An amount that is not a finite number raises `InvalidAmountError`;
    use `try_create` to get None instead.
    """

    __slots__ = ("_amount", "_currency", "_rounding_mode")

    MAX_VALUE = Decimal("999_999_999_999_999.999999999999999999")
    MIN_VALUE = Decimal("-999_999_999_999_999.999999999999999999")

    def __init__(self, amount: DecimalLike, currency: Currency, rounding_mode: RoundingMode = RoundingMode.HALF_EVEN):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric value as Decimal, int, float or str. Strings may be formatted for
                $currency (e.g. "$1,204.50"); plain numeric strings work too.
            currency: Currency of the amount.
            rounding_mode: Rounding applied at construction and by every operation.

        Raises:
            InvalidAmountError: If $amount is NaN, infinite, out of range or cannot be parsed.
            TypeError: If $currency or $rounding_mode has the wrong type, or $amount is not Decimal-like.
        """
        # Raise: currency must be a descriptor, not a code
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot init `Money` because $currency ({currency!r}) is not a Currency")

        # Raise: rounding mode must be a RoundingMode member
        if not isinstance(rounding_mode, RoundingMode):
            raise TypeError(f"Cannot init `Money` because $rounding_mode ({rounding_mode!r}) is not a RoundingMode")

        if isinstance(amount, str):
            decimal_amount = parse_decimal(amount, currency)
        else:
            decimal_amount = to_decimal_or_nan(amount)

        # Raise: never store NaN or infinity, and never substitute zero for them
        if not decimal_amount.is_finite():
            raise InvalidAmountError(f"Cannot init `Money` because $amount ({amount!r}) is not a finite number")

        # Raise: keep amounts in a range where rounding stays cheap
        if not self.MIN_VALUE <= decimal_amount <= self.MAX_VALUE:
            raise InvalidAmountError(f"Cannot init `Money` because $amount ({amount!r}) is outside [{self.MIN_VALUE}, {self.MAX_VALUE}]")

        self._amount = round_to_scale(decimal_amount, currency.minor_units, rounding_mode)
        self._currency = currency
        self._rounding_mode = rounding_mode

    # region Factory methods

    @classmethod
    def try_create(cls, amount: DecimalLike, currency: Currency, rounding_mode: RoundingMode = RoundingMode.HALF_EVEN) -> Money | None:
        """Create Money, or return None when $amount is not a valid number."""
        try:
            return cls(amount, currency, rounding_mode)
        except InvalidAmountError as e:
            logger.debug(f"Could not create Money: {e}")
            return None

    @classmethod
    def zero(cls, currency: Currency, rounding_mode: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        """Exact zero at the scale of $currency."""
        return cls(Decimal(0), currency, rounding_mode)

    @classmethod
    def from_minor_units(cls, units: int, currency: Currency, rounding_mode: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        """Create Money from a whole number of minor units, e.g. 423 cents -> 4.23."""
        # Raise: minor units are whole numbers
        if isinstance(units, bool) or not isinstance(units, int):
            raise TypeError(f"Cannot call `Money.from_minor_units` because $units ({units!r}) is not an int")

        return cls(from_minor_units(units, currency.minor_units), currency, rounding_mode)

    @classmethod
    def from_str(cls, text: str, rounding_mode: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        """Parse "<amount> <code>" (e.g. "1000.50 USD"), the format produced by `str(money)`.

        The code is looked up with `Currency.from_str`, so it must be registered.

        Raises:
            ValueError: If $text is not two whitespace-separated tokens or the code is unknown.
            InvalidAmountError: If the amount token is not a number.
        """
        tokens = text.split()

        # Raise: expect exactly an amount and a code
        if len(tokens) != 2:
            raise ValueError(f"Cannot call `Money.from_str` because $text ('{text}') is not in format '<amount> <code>'")

        amount_token, code_token = tokens
        try:
            currency = Currency.from_str(code_token)
        except ValueError as e:
            raise ValueError(f"Cannot call `Money.from_str` because currency code '{code_token}' in $text ('{text}') is unknown") from e

        return cls(amount_token, currency, rounding_mode)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount, rounded to the currency's minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._rounding_mode

    @property
    def is_zero(self) -> bool:
        return is_zero(self._amount)

    @property
    def is_negative(self) -> bool:
        return is_negative(self._amount)

    @property
    def is_positive(self) -> bool:
        return is_positive(self._amount)

    @property
    def absolute_amount(self) -> Decimal:
        return absolute(self._amount)

    @property
    def amount_in_minor_units(self) -> int:
        """Amount as a whole number of minor units (e.g. 4.23 USD -> 423)."""
        return to_minor_units(self._amount, self._currency.minor_units)

    @property
    def one_minor_unit(self) -> Decimal:
        """Smallest step of the currency (e.g. Decimal("0.01") for USD)."""
        return one_minor_unit(self._currency.minor_units)

    # endregion

    # region Arithmetic

    def add(self, other: Money | DecimalLike) -> Money:
        """Return $self + $other.

        A Money operand must have the same currency; a bare number is added as is.

        Raises:
            CurrencyMismatchError: If $other is Money in a different currency.
            InvalidAmountError: If $other is not a valid number.
        """
        other_amount = self._operand_amount(other)
        return self._new(add_exact(self._amount, other_amount))

    def subtract(self, other: Money | DecimalLike) -> Money:
        """Return $self - $other. Same currency rules as `add`."""
        other_amount = self._operand_amount(other)
        return self._new(subtract_exact(self._amount, other_amount))

    def multiply(self, multiplier: DecimalLike) -> Money:
        """Return $self * $multiplier rounded to this currency's minor units."""
        return self._new(multiply_exact(self._amount, to_decimal_or_nan(multiplier)))

    def negate(self) -> Money:
        return self._new(self._amount.copy_negate())

    def _multiply_into(self, multiplier: DecimalLike, target_currency: Currency) -> Money:
        """Return $self * $multiplier as Money in $target_currency, rounded to its minor units.

        Used by conversion strategies only.
        """
        raw = multiply_exact(self._amount, to_decimal_or_nan(multiplier))
        return Money(raw, target_currency, self._rounding_mode)

    def _divide(self, divisor: DecimalLike, rounding_mode: RoundingMode | None = None) -> Money:
        """Return $self / $divisor rounded to this currency's minor units.

        Args:
            divisor: Non-zero Decimal-like value.
            rounding_mode: Overrides $self.rounding_mode for this division only.

        Raises:
            DivisionByZeroError: If $divisor is zero.
        """
        mode = rounding_mode if rounding_mode is not None else self._rounding_mode
        quotient = divide_rounded(self._amount, to_decimal_or_nan(divisor), self._currency.minor_units, mode)
        return self._new(quotient)

    # endregion

    # region Allocation

    def allocate(self, n: int) -> list[Money]:
        """Split this amount into $n parts whose sum equals this amount exactly.

        Parts differ by at most one minor unit; the larger parts come first.
        E.g. 0.05 EUR allocated to 2 recipients gives [0.03, 0.02].

        Args:
            n: Number of recipients (> 0).

        Returns:
            List of $n Money objects.

        Raises:
            AllocationError: If $n is not an integer > 0.
        """
        allocation.validate_parts_count(n)

        low = self._divide(n, RoundingMode.FLOOR)
        high = low.add(self.one_minor_unit)
        remainder = self.amount_in_minor_units % n

        result = allocation.spread_remainder(low, high, n, remainder)
        logger.debug(f"Allocated {self} into {n} part(s): {remainder} x {high.amount}, {n - remainder} x {low.amount}")
        return result

    def allocate_by_ratios(self, ratios: Sequence[int]) -> list[Money]:
        """Split this amount proportionally to $ratios, keeping the sum exact.

        Minor units lost to rounding are added one by one to the parts at the lowest indexes.
        E.g. 1 EUR allocated by [70, 30] gives [0.70, 0.30].

        Args:
            ratios: Non-negative integer weights with a positive sum.

        Returns:
            One Money per ratio, in input order.

        Raises:
            AllocationError: If $ratios are invalid.
        """
        shares = allocation.split_by_ratios(self.amount_in_minor_units, ratios)
        result = [Money.from_minor_units(share, self._currency, self._rounding_mode) for share in shares]
        logger.debug(f"Allocated {self} by $ratios {list(ratios)} into {[str(part.amount) for part in result]}")
        return result

    # endregion

    # region Conversion

    def convert_to(self, target_currency: Currency, rate: DecimalLike, strategy: ConvertStrategy | None = None) -> Money:
        """Convert into $target_currency using exchange $rate.

        Args:
            target_currency: Currency of the result.
            rate: Units of $target_currency per one unit of this currency.
            strategy: Conversion policy; defaults to `NormalConvertStrategy`.

        Raises:
            SameCurrencyConversionError: If $target_currency is this currency (default strategy).
            NegativeExchangeRateError: If $rate is not > 0 (default strategy).
        """
        strategy = strategy if strategy is not None else NormalConvertStrategy()
        result = strategy.convert(self, target_currency, rate)
        logger.debug(f"Converted {self} to {result} at $rate {rate} using {strategy.__class__.__name__}")
        return result

    # endregion

    # region Utilities

    def _new(self, amount: Decimal) -> Money:
        return Money(amount, self._currency, self._rounding_mode)

    def _check_same_currency(self, other: Money) -> None:
        """Guard for operations that only make sense within one currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self._currency != other._currency:
            raise CurrencyMismatchError(f"Cannot combine Money in {self._currency.code} with Money in {other._currency.code}")

    def _operand_amount(self, other: Money | DecimalLike) -> Decimal:
        if isinstance(other, Money):
            self._check_same_currency(other)
            return other.amount
        return to_decimal_or_nan(other)

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1 when $self is less than, equal to or greater than $other.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_same_currency(other)
        if self._amount < other.amount:
            return -1
        if self._amount > other.amount:
            return 1
        return 0

    def format(self) -> str:
        """Format for display using the currency's formatter (e.g. "$1,204.50")."""
        return self._currency.format_amount(self._amount)

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        # Money of another currency is simply unequal; only ordering raises
        if not isinstance(other, Money):
            return False
        return self._currency == other._currency and self._amount == other._amount

    def __hash__(self) -> int:
        return hash((self._amount, self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other):
        if not _is_operand(other, allow_money=True):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Makes sum(...) work with a Money start value and number + Money
        return self.__add__(other)

    def __sub__(self, other):
        if not _is_operand(other, allow_money=True):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        """number - Money, evaluated as -Money + number."""
        if not _is_operand(other, allow_money=False):
            return NotImplemented
        return self.negate().add(other)

    def __mul__(self, other):
        # Money * Money has no monetary meaning
        if not _is_operand(other, allow_money=False):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self) -> Money:
        return self.negate()

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self._new(self.absolute_amount)

    # endregion

    def __str__(self) -> str:
        """Amount and code, e.g. "1000.50 USD"; `Money.from_str` reads it back."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"


def _is_operand(value, allow_money: bool) -> bool:
    """Tell whether $value may appear next to Money in an arithmetic operator."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Money):
        return allow_money
    return isinstance(value, DECIMAL_LIKE_TYPES)
