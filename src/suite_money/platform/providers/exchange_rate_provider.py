from __future__ import annotations

import logging
from decimal import Decimal
from typing import Mapping, Protocol

from suite_money.domain.monetary.rounding_mode import RoundingMode
from suite_money.utils.decimal_tools import DecimalLike, divide_rounded, is_positive, to_decimal_or_nan

logger = logging.getLogger(__name__)

# Fractional digits kept when a rate is derived from the reverse pair
INVERSE_RATE_SCALE = 12


# region Interface


class ExchangeRateProvider(Protocol):
    """Source of exchange rates between two currency codes.

    Network-backed implementations live outside this package; they resolve the rate
    before any Money arithmetic happens.
    """

    def get_rate(self, source_code: str, target_code: str) -> Decimal | None:
        """Return units of $target_code per one unit of $source_code, or None if unknown."""
        ...


# endregion


class StaticExchangeRateProvider(ExchangeRateProvider):
    """In-memory table of exchange rates.

    When only the reverse pair is known, the inverse rate is derived (rounded half-even to
    `INVERSE_RATE_SCALE` digits).
    """

    # region Init

    def __init__(self, rates: Mapping[tuple[str, str], DecimalLike] | None = None) -> None:
        """Create the provider.

        Args:
            rates: Optional initial rates keyed by (source_code, target_code).

        Raises:
            ValueError: If any rate is not > 0.
        """
        self._rates: dict[tuple[str, str], Decimal] = {}
        for (source_code, target_code), rate in (rates or {}).items():
            self.set_rate(source_code, target_code, rate)

    # endregion

    def set_rate(self, source_code: str, target_code: str, rate: DecimalLike) -> None:
        """Store $rate for converting $source_code into $target_code.

        Raises:
            ValueError: If $rate is not > 0 or both codes are the same.
        """
        source_code = source_code.upper().strip()
        target_code = target_code.upper().strip()

        # Raise: identity pairs never need a rate
        if source_code == target_code:
            raise ValueError(f"Cannot call `set_rate` because $source_code and $target_code are both '{source_code}'")

        rate_value = to_decimal_or_nan(rate)

        # Raise: rate must be strictly positive
        if not is_positive(rate_value):
            raise ValueError(f"Cannot call `set_rate` because $rate ({rate}) must be > 0")

        self._rates[(source_code, target_code)] = rate_value
        logger.debug(f"Set exchange rate {source_code}/{target_code} = {rate_value}")

    # region Protocol ExchangeRateProvider

    def get_rate(self, source_code: str, target_code: str) -> Decimal | None:
        """Implements: ExchangeRateProvider.get_rate"""
        source_code = source_code.upper().strip()
        target_code = target_code.upper().strip()

        direct = self._rates.get((source_code, target_code))
        if direct is not None:
            return direct

        reverse = self._rates.get((target_code, source_code))
        if reverse is not None:
            return divide_rounded(Decimal(1), reverse, INVERSE_RATE_SCALE, RoundingMode.HALF_EVEN)

        logger.debug(f"No exchange rate known for {source_code}/{target_code}")
        return None

    # endregion
