from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from suite_money.domain.monetary.currency_registry import BTC, EUR, JPY, TND, USD
from suite_money.domain.monetary.errors import AllocationError
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding_mode import RoundingMode


def _amounts(parts: list[Money]) -> list[Decimal]:
    return [part.amount for part in parts]


def _total(parts: list[Money]) -> Money:
    return sum(parts[1:], parts[0])


# region Allocate by count


@pytest.mark.parametrize(
    "amount, currency, n, expected",
    [
        ("0.05", EUR, 2, ["0.03", "0.02"]),
        ("0.07", EUR, 2, ["0.04", "0.03"]),
        ("10", USD, 3, ["3.34", "3.33", "3.33"]),
        ("-0.05", EUR, 2, ["-0.02", "-0.03"]),
        ("100", JPY, 3, ["34", "33", "33"]),
        ("0.02", USD, 5, ["0.01", "0.01", "0.00", "0.00", "0.00"]),
        ("0.010", TND, 4, ["0.003", "0.003", "0.002", "0.002"]),
        ("4.23", USD, 1, ["4.23"]),
        ("0", USD, 3, ["0.00", "0.00", "0.00"]),
    ],
)
def test_allocate(amount, currency, n, expected):
    money = Money(amount, currency)
    parts = money.allocate(n)

    assert _amounts(parts) == [Decimal(value) for value in expected]
    assert all(part.currency == currency for part in parts)
    assert _total(parts) == money


def test_allocate_keeps_rounding_mode():
    parts = Money("0.05", EUR, RoundingMode.HALF_UP).allocate(2)
    assert _amounts(parts) == [Decimal("0.03"), Decimal("0.02")]
    assert all(part.rounding_mode == RoundingMode.HALF_UP for part in parts)


@pytest.mark.parametrize("n", [0, -1, True, 2.0, "2"])
def test_allocate_invalid_count_is_precondition_violation(n):
    with pytest.raises(AllocationError):
        Money("1", USD).allocate(n)


# endregion

# region Allocate by ratios


@pytest.mark.parametrize(
    "amount, currency, ratios, expected",
    [
        ("1", EUR, [70, 30], ["0.70", "0.30"]),
        ("0.05", EUR, [3, 7], ["0.02", "0.03"]),
        ("0.05", USD, [1, 1, 1], ["0.02", "0.02", "0.01"]),
        ("0.05", USD, [0, 1, 1], ["0.01", "0.02", "0.02"]),
        ("-0.05", USD, [1, 1], ["-0.02", "-0.03"]),
        ("100", JPY, [1, 2], ["34", "66"]),
    ],
)
def test_allocate_by_ratios(amount, currency, ratios, expected):
    money = Money(amount, currency)
    parts = money.allocate_by_ratios(ratios)

    assert _amounts(parts) == [Decimal(value) for value in expected]
    assert _total(parts) == money


@pytest.mark.parametrize("ratios", [[], [0, 0], [1, -1], [-1, -2], [1.5, 1], [True, 1]])
def test_allocate_by_invalid_ratios_is_precondition_violation(ratios):
    with pytest.raises(AllocationError):
        Money("1", USD).allocate_by_ratios(ratios)


# endregion

# region Properties


currencies = st.sampled_from([USD, JPY, TND, BTC])
minor_units = st.integers(min_value=-(10**12), max_value=10**12)


@given(currency=currencies, units=minor_units, n=st.integers(min_value=1, max_value=50))
def test_allocated_parts_sum_to_amount_and_differ_by_at_most_one_minor_unit(currency, units, n):
    money = Money.from_minor_units(units, currency)
    parts = money.allocate(n)

    assert len(parts) == n
    assert _total(parts) == money

    amounts = _amounts(parts)
    assert max(amounts) - min(amounts) <= money.one_minor_unit
    assert amounts == sorted(amounts, reverse=True)


@given(
    currency=currencies,
    units=minor_units,
    ratios=st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=20).filter(lambda r: sum(r) > 0),
)
def test_ratio_parts_sum_to_amount(currency, units, ratios):
    money = Money.from_minor_units(units, currency)
    parts = money.allocate_by_ratios(ratios)

    assert len(parts) == len(ratios)
    assert _total(parts) == money


# endregion
