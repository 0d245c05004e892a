from decimal import Decimal

import pytest

from suite_money.domain.monetary.currency_registry import EUR, USD
from suite_money.domain.monetary.errors import InvalidAmountError
from suite_money.domain.monetary.locale_currency import LocaleCurrency
from suite_money.domain.monetary.money import Money


# region Creation


def test_can_create_currency_from_locale_with_associated_currency():
    currency = LocaleCurrency.from_locale("fr_FR")
    assert currency is not None
    assert currency.code == "EUR"


def test_cannot_create_currency_from_locale_without_associated_currency():
    assert LocaleCurrency.from_locale("en") is None


def test_cannot_create_currency_from_invalid_locale_identifier():
    assert LocaleCurrency.from_locale("randomString") is None


def test_can_create_currency_with_currency_code():
    currency = LocaleCurrency.from_code("EUR")
    assert currency is not None
    assert currency.code == "EUR"


@pytest.mark.parametrize("code", ["randomString", "", "XYZ"])
def test_cannot_create_currency_with_invalid_currency_code(code):
    assert LocaleCurrency.from_code(code) is None


def test_constructor_raises_for_locale_without_currency():
    with pytest.raises(ValueError, match="no associated currency"):
        LocaleCurrency("en")


# endregion

# region Properties


def test_currency_code_and_symbol_match_locale():
    currency = LocaleCurrency("en_US")
    assert currency.code == "USD"
    assert currency.symbol == "$"
    assert currency.minor_units == 2


def test_currency_symbol_of_euro_is_not_dollar():
    currency = LocaleCurrency.from_code("EUR")
    assert currency.symbol != "$"


def test_minor_units_come_from_currency_data():
    assert LocaleCurrency.from_locale("fr_TN").minor_units == 3
    assert LocaleCurrency.from_code("JPY").minor_units == 0
    assert LocaleCurrency.from_code("EUR").minor_units != 3


def test_separators_come_from_locale():
    german = LocaleCurrency("de_DE")
    american = LocaleCurrency("en_US")
    assert german.separator == ","
    assert german.delimiter == "."
    assert american.separator == "."
    assert american.delimiter == ","


# endregion

# region Identity


def test_locale_currency_equals_plain_currency_with_same_code():
    assert LocaleCurrency("en_US") == USD
    assert LocaleCurrency.from_code("EUR") == EUR
    assert LocaleCurrency("en_US") != LocaleCurrency("fr_TN")


# endregion

# region Formatting and parsing


def test_format_amount_uses_locale():
    assert LocaleCurrency("en_US").format_amount(Decimal("1234.5")) == "$1,234.50"


def test_parse_amount_understands_formatted_values():
    assert LocaleCurrency("en_US").parse_amount("$1,234.50") == Decimal("1234.50")
    assert LocaleCurrency("de_DE").parse_amount("1.234,50 €") == Decimal("1234.50")


def test_parse_amount_returns_none_for_garbage():
    assert LocaleCurrency("en_US").parse_amount("Random &^Ugjh2 string") is None


def test_money_accepts_formatted_strings():
    assert Money("$1", LocaleCurrency("en_US")).amount == Decimal("1.00")
    assert Money("1 €", LocaleCurrency.from_code("EUR")).amount == Decimal("1.00")


def test_plain_numeric_string_is_not_read_with_locale_separators():
    german = LocaleCurrency("de_DE")
    assert german.parse_amount("4.23") is None
    assert Money("4.23", german).amount == Decimal("4.23")
    assert Money("1234.5", german).amount == Decimal("1234.50")


def test_symbol_bearing_string_is_read_with_locale_separators():
    assert Money("1.234,50 €", LocaleCurrency("de_DE")).amount == Decimal("1234.50")
    assert Money("1.234,5 EUR", LocaleCurrency("de_DE")).amount == Decimal("1234.50")


def test_parse_amount_rejects_malformed_grouping():
    assert LocaleCurrency("en_US").parse_amount("$1,23.45") is None

    with pytest.raises(InvalidAmountError):
        Money("$1,23.45", LocaleCurrency("en_US"))


# endregion
