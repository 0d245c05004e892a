from decimal import Decimal

import pytest

from suite_money.config import ENV_DEFAULT_CURRENCY, ENV_LOCALE, ENV_ROUNDING_MODE, MoneySettings
from suite_money.domain.monetary.currency_registry import EUR, JPY, USD
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding_mode import RoundingMode

ALL_VARIABLES = (ENV_DEFAULT_CURRENCY, ENV_ROUNDING_MODE, ENV_LOCALE)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables, and remove again whatever `load_dotenv` sets during the test."""
    for name in ALL_VARIABLES:
        # setenv records the original state, so teardown also undoes values written by load_dotenv
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults():
    settings = MoneySettings()
    assert settings.default_currency is USD
    assert settings.rounding_mode == RoundingMode.HALF_EVEN
    assert settings.money("1.005").amount == Decimal("1.00")
    assert settings.zero() == Money.zero(USD)


def test_rounding_mode_is_used_for_created_money():
    settings = MoneySettings(rounding_mode=RoundingMode.HALF_UP)
    money = settings.money("1.005")
    assert money.amount == Decimal("1.01")
    assert money.rounding_mode == RoundingMode.HALF_UP


def test_settings_are_frozen():
    settings = MoneySettings()
    with pytest.raises(AttributeError):
        settings.default_currency_code = "EUR"


def test_unknown_default_currency_raises():
    with pytest.raises(ValueError, match="not found in registry"):
        _ = MoneySettings(default_currency_code="XXX").default_currency


def test_locale_currency():
    assert MoneySettings(locale="de_DE").locale_currency() == EUR


def test_from_env_without_variables_uses_defaults(clean_env, tmp_path):
    settings = MoneySettings.from_env(tmp_path / "missing.env")
    assert settings == MoneySettings()


def test_from_env_reads_environment(clean_env, tmp_path):
    clean_env.setenv(ENV_DEFAULT_CURRENCY, " eur ")
    clean_env.setenv(ENV_ROUNDING_MODE, "half_up")
    clean_env.setenv(ENV_LOCALE, "de_DE")

    settings = MoneySettings.from_env(tmp_path / "missing.env")

    assert settings.default_currency is EUR
    assert settings.rounding_mode == RoundingMode.HALF_UP
    assert settings.locale == "de_DE"


def test_from_env_reads_dotenv_file(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{ENV_DEFAULT_CURRENCY}=JPY\n{ENV_ROUNDING_MODE}=FLOOR\n", encoding="utf-8")

    settings = MoneySettings.from_env(dotenv_file)

    assert settings.default_currency is JPY
    assert settings.rounding_mode == RoundingMode.FLOOR
    assert settings.money("2.9").amount == Decimal("2")


def test_environment_wins_over_dotenv_file(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{ENV_DEFAULT_CURRENCY}=JPY\n", encoding="utf-8")
    clean_env.setenv(ENV_DEFAULT_CURRENCY, "EUR")

    assert MoneySettings.from_env(dotenv_file).default_currency is EUR


def test_from_env_rejects_unknown_rounding_mode(clean_env, tmp_path):
    clean_env.setenv(ENV_ROUNDING_MODE, "SIDEWAYS")

    with pytest.raises(ValueError, match="SIDEWAYS"):
        MoneySettings.from_env(tmp_path / "missing.env")
