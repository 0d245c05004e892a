from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum


class RoundingMode(Enum):
    """Rounding modes available for monetary amounts.

    Each member wraps the matching `decimal` rounding constant, so `mode.value` can be passed
    directly to `Decimal.quantize`.

    Members:
        HALF_EVEN: Banker's rounding, ties go to the even digit. Default for Money.
        HALF_UP: Ties go away from zero.
        HALF_DOWN: Ties go towards zero.
        UP: Always away from zero.
        DOWN: Always towards zero (truncation).
        CEILING: Always towards positive infinity.
        FLOOR: Always towards negative infinity.
    """

    HALF_EVEN = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR

    @classmethod
    def from_name(cls, name: str) -> RoundingMode:
        """Look up a member by its name, case-insensitively (e.g. "half_even").

        Raises:
            ValueError: If $name is not a known rounding mode.
        """
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as e:
            raise ValueError(f"Cannot call `RoundingMode.from_name` because $name ('{name}') is not one of {[m.name for m in cls]}") from e
