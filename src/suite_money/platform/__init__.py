"""Services around the domain: exchange-rate providers and the currency converter."""
