from suite_money.domain.monetary.currency import Currency, CurrencyType


# Fiat currencies
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT, symbol="$", separator=".", delimiter=",")
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT, symbol="€", separator=".", delimiter=",")
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT, symbol="£", separator=".", delimiter=",")
BGN = Currency("BGN", 2, "Bulgarian Lev", CurrencyType.FIAT, symbol="лв.", separator=",", delimiter=" ")
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT, symbol="¥", separator=".", delimiter=",")
TND = Currency("TND", 3, "Tunisian Dinar", CurrencyType.FIAT, symbol="DT", separator=",", delimiter=".")

# Crypto currencies
BTC = Currency("BTC", 8, "Bitcoin", CurrencyType.CRYPTO, symbol="₿", separator=".", delimiter=",")
ETH = Currency("ETH", 18, "Ethereum", CurrencyType.CRYPTO, separator=".")
USDT = Currency("USDT", 6, "Tether", CurrencyType.CRYPTO, separator=".", delimiter=",")

# Commodities
XAU = Currency("XAU", 4, "Gold", CurrencyType.COMMODITY, separator=".")
XAG = Currency("XAG", 4, "Silver", CurrencyType.COMMODITY, separator=".")

# Register all predefined currencies
for _currency in (USD, EUR, GBP, BGN, JPY, TND, BTC, ETH, USDT, XAU, XAG):
    Currency.register(_currency, overwrite=True)
