from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    Context,
    Decimal,
    InvalidOperation,
)
from typing import TYPE_CHECKING, TypeAlias

from suite_money.domain.monetary.errors import DivisionByZeroError
from suite_money.domain.monetary.rounding_mode import RoundingMode

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

DECIMAL_LIKE_TYPES = (Decimal, int, str, float)

# Sentinel for "not a number"; it propagates through arithmetic but never ends up inside Money
NAN = Decimal("NaN")

# Unlimited precision: add, subtract, multiply and quantize are always exact here
_EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

# Extra digits kept by the intermediate ROUND_05UP division step
_GUARD_DIGITS = 3
_MIN_DIVISION_PRECISION = 28


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        decimal.InvalidOperation: If $value is a string that is not a number.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def to_decimal_or_nan(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal`, returning `NAN` instead of raising for unparseable strings.

    Raises:
        TypeError: If $value is not one of the `DecimalLike` types.
    """
    # Raise: only scalar number-like inputs are accepted
    if isinstance(value, bool) or not isinstance(value, DECIMAL_LIKE_TYPES):
        raise TypeError(f"Cannot call `to_decimal_or_nan` because $value has unsupported type '{type(value).__name__}'")

    if isinstance(value, str):
        return parse_decimal(value)

    return as_decimal(value)


def is_nan(value: Decimal) -> bool:
    return value.is_nan()


# region Sign tests


def is_zero(value: Decimal) -> bool:
    """Exact zero test; NaN is not zero."""
    return not value.is_nan() and value.is_zero()


def is_negative(value: Decimal) -> bool:
    """Exact test for values strictly below zero (negative zero is not negative)."""
    return not value.is_nan() and value.is_signed() and not value.is_zero()


def is_positive(value: Decimal) -> bool:
    """Exact test for values strictly above zero."""
    return not value.is_nan() and not value.is_signed() and not value.is_zero()


def absolute(value: Decimal) -> Decimal:
    return value.copy_abs()


# endregion

# region Exact arithmetic


def add_exact(a: Decimal, b: Decimal) -> Decimal:
    """Return $a + $b without any precision loss. NaN operands give NaN."""
    return _EXACT_CONTEXT.add(a, b)


def subtract_exact(a: Decimal, b: Decimal) -> Decimal:
    """Return $a - $b without any precision loss. NaN operands give NaN."""
    return _EXACT_CONTEXT.subtract(a, b)


def multiply_exact(a: Decimal, b: Decimal) -> Decimal:
    """Return $a * $b without any precision loss. NaN operands give NaN."""
    return _EXACT_CONTEXT.multiply(a, b)


def divide_rounded(dividend: Decimal, divisor: Decimal, scale: int, mode: RoundingMode = RoundingMode.HALF_EVEN) -> Decimal:
    """Divide $dividend by $divisor and round the quotient to $scale fractional digits.

    The quotient is first computed with a few guard digits using ROUND_05UP, which keeps
    enough information for the final rounding with $mode to be exact (no double rounding).

    Args:
        dividend: Value to divide.
        divisor: Value to divide by.
        scale: Number of fractional digits of the result.
        mode: Rounding mode applied to the final result.

    Returns:
        Rounded quotient, or `NAN` if any operand is NaN.

    Raises:
        DivisionByZeroError: If $divisor is zero.
    """
    if dividend.is_nan() or divisor.is_nan():
        return NAN

    # Raise: division by zero is a caller bug
    if divisor.is_zero():
        raise DivisionByZeroError("Division by zero")

    if dividend.is_zero():
        return round_to_scale(Decimal(0), scale, mode)

    # Digits needed from the leading digit of the quotient down to 10^-(scale + guard)
    needed_digits = dividend.adjusted() - divisor.adjusted() + 1 + scale + _GUARD_DIGITS
    context = Context(
        prec=max(needed_digits, _MIN_DIVISION_PRECISION),
        rounding=ROUND_05UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )
    quotient = context.divide(dividend, divisor)
    return round_to_scale(quotient, scale, mode)


# endregion

# region Rounding and scaling


def round_to_scale(value: Decimal, scale: int, mode: RoundingMode = RoundingMode.HALF_EVEN) -> Decimal:
    """Round $value to $scale fractional digits using $mode.

    Rounding an already scaled value again is a no-op. NaN and infinities are returned unchanged.
    """
    if not value.is_finite():
        return value

    exponent = Decimal(1).scaleb(-scale, context=_EXACT_CONTEXT)
    return value.quantize(exponent, rounding=mode.value, context=_EXACT_CONTEXT)


def multiply_by_power_of_ten(value: Decimal, exponent: int) -> Decimal:
    """Return $value * 10^$exponent by moving the decimal point (exact)."""
    return value.scaleb(exponent, context=_EXACT_CONTEXT)


def divide_by_power_of_ten(value: Decimal, exponent: int) -> Decimal:
    """Return $value / 10^$exponent by moving the decimal point (exact)."""
    return value.scaleb(-exponent, context=_EXACT_CONTEXT)


def one_minor_unit(scale: int) -> Decimal:
    """Smallest representable step at $scale, e.g. Decimal("0.01") for scale 2."""
    return Decimal(1).scaleb(-scale, context=_EXACT_CONTEXT)


def to_minor_units(value: Decimal, scale: int) -> int:
    """Express $value as an integer count of minor units (e.g. 4.23 with scale 2 -> 423).

    Digits beyond $scale are truncated; callers pass values that are already rounded to $scale.

    Raises:
        ValueError: If $value is NaN or infinite.
    """
    # Raise: minor units only exist for finite amounts
    if not value.is_finite():
        raise ValueError(f"Cannot call `to_minor_units` because $value ({value}) is not finite")

    return int(multiply_by_power_of_ten(value, scale))


def from_minor_units(units: int, scale: int) -> Decimal:
    """Build a Decimal with exactly $scale fractional digits from integer minor $units."""
    return Decimal(units).scaleb(-scale, context=_EXACT_CONTEXT)


# endregion

# region Parsing


def parse_decimal(text: str, currency: Currency | None = None) -> Decimal:
    """Parse a display string into a Decimal.

    When $currency is given, its currency-aware parser runs first; it only accepts text that
    carries the currency symbol or code. Plain locale-free parsing is the fallback, so "12.5"
    means twelve and a half for every currency.

    Args:
        text: String such as "4.23", "$1,204.50" or "1 €".
        currency: Optional currency whose formatting rules apply to $text.

    Returns:
        Parsed finite value, or `NAN` when neither parser accepts $text.
    """
    if currency is not None:
        parsed = currency.parse_amount(text)
        if parsed is not None and parsed.is_finite():
            return parsed

    try:
        result = Decimal(text.strip())
    except (InvalidOperation, ValueError):
        return NAN

    if not result.is_finite():
        return NAN

    return result


# endregion
