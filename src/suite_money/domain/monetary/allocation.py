"""Integer minor-unit splitting used by `Money.allocate` and `Money.allocate_by_ratios`.

All functions work on whole minor units (cents, stotinki, satoshis), so no amount is created
or lost to rounding: the parts always sum to the original total.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from suite_money.domain.monetary.errors import AllocationError

T = TypeVar("T")


def validate_parts_count(n: int) -> None:
    """Ensure $n is a usable number of recipients.

    Raises:
        AllocationError: If $n is not an integer greater than zero.
    """
    # Raise: need at least one recipient
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise AllocationError(f"Cannot allocate because recipients count $n ({n!r}) must be an integer > 0")


def validate_ratios(ratios: Sequence[int]) -> None:
    """Ensure $ratios are non-negative integers with a positive total.

    Raises:
        AllocationError: If $ratios is empty, holds a non-integer or negative value, or sums to 0.
    """
    # Raise: ratios must be whole non-negative weights
    for ratio in ratios:
        if isinstance(ratio, bool) or not isinstance(ratio, int) or ratio < 0:
            raise AllocationError(f"Cannot allocate because $ratios ({list(ratios)}) contain {ratio!r}, which is not an integer >= 0")

    # Raise: a zero total leaves nothing to weight the parts with
    if sum(ratios) <= 0:
        raise AllocationError(f"Cannot allocate because sum of $ratios ({list(ratios)}) must be > 0")


def spread_remainder(low: T, high: T, count: int, remainder: int) -> list[T]:
    """Return $count parts where the first $remainder parts are $high and the rest are $low."""
    return [high if index < remainder else low for index in range(count)]


def split_by_ratios(total_units: int, ratios: Sequence[int]) -> list[int]:
    """Split $total_units proportionally to $ratios.

    Each share is `total_units * ratio // sum(ratios)`. Floor division keeps the leftover in
    [0, len(ratios)) for negative totals too. The leftover units are then handed out one by one
    to the parts in input order, starting at index 0 (not to the largest fractional remainders).

    Args:
        total_units: Amount in minor units.
        ratios: Non-negative integer weights with a positive sum.

    Returns:
        One share per ratio, in input order, summing exactly to $total_units.

    Raises:
        AllocationError: If $ratios are invalid.

    Examples:
        >>> split_by_ratios(100, [70, 30])
        [70, 30]
        >>> split_by_ratios(5, [1, 1, 1])
        [2, 2, 1]
    """
    validate_ratios(ratios)

    total_ratio = sum(ratios)
    shares = [total_units * ratio // total_ratio for ratio in ratios]
    leftover = total_units - sum(shares)

    for index in range(leftover):
        shares[index] += 1

    return shares
