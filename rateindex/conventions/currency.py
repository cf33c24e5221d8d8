"""
Currency value type.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """An ISO 4217 currency, identified by its three-letter code."""

    code: str

    def __post_init__(self):
        code = self.code
        if not (isinstance(code, str) and len(code) == 3 and code.isalpha() and code.isupper()):
            raise ValueError(f"Invalid currency code: {self.code!r}")

    @classmethod
    def of(cls, code: str) -> "Currency":
        """Parse a currency code, case-insensitively (e.g. 'gbp', 'AUD')."""
        if not isinstance(code, str):
            raise ValueError(f"Invalid currency code: {code!r}")
        return cls(code.strip().upper())

    def __str__(self) -> str:
        return self.code


# Commonly used currencies
Currency.GBP = Currency("GBP")
Currency.EUR = Currency("EUR")
Currency.USD = Currency("USD")
Currency.JPY = Currency("JPY")
Currency.CHF = Currency("CHF")
Currency.AUD = Currency("AUD")
Currency.KRW = Currency("KRW")
