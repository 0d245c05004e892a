"""Exceptions raised by the monetary domain.

Two families exist:

- `PreconditionViolation` marks programmer errors (mixing currencies, allocating to zero
  recipients, dividing by zero). These derive from `AssertionError` and are not meant to be
  caught for control flow.
- `MoneyError` marks recoverable data errors (unparseable amounts, rejected conversions).
  Callers are expected to handle these.
"""


class PreconditionViolation(AssertionError):
    """Raised when a caller breaks the contract of a monetary operation."""


class CurrencyMismatchError(PreconditionViolation):
    """Raised when two Money objects with different currencies are combined or compared."""


class AllocationError(PreconditionViolation):
    """Raised when allocation gets a non-positive count or an invalid list of ratios."""


class DivisionByZeroError(PreconditionViolation):
    """Raised when a monetary amount is divided by zero."""


class MoneyError(Exception):
    """Base class for recoverable monetary errors."""


class InvalidAmountError(MoneyError, ValueError):
    """Raised when an amount is NaN, infinite or cannot be parsed."""


class ConversionError(MoneyError):
    """Base class for errors raised while converting Money into another currency."""


class SameCurrencyConversionError(ConversionError):
    """Raised when the target currency equals the source currency."""


class NegativeExchangeRateError(ConversionError):
    """Raised when the exchange rate is zero, negative or not a number."""


class ExchangeRateNotFoundError(ConversionError):
    """Raised when no exchange rate is known for a currency pair."""
