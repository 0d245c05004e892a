__version__ = "0.1.0"

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.locale_currency import LocaleCurrency
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding_mode import RoundingMode
from suite_money.domain.conversion.protocol import ConvertStrategy
from suite_money.domain.conversion.normal_convert_strategy import NormalConvertStrategy
from suite_money.config import MoneySettings

__all__ = [
    "Currency",
    "CurrencyType",
    "LocaleCurrency",
    "Money",
    "RoundingMode",
    "ConvertStrategy",
    "NormalConvertStrategy",
    "MoneySettings",
]
