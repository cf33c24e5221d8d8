"""
Tenor value type for index periods.
"""

from dataclasses import dataclass

_UNIT_NAMES = {
    "D": "days",
    "W": "weeks",
    "M": "months",
    "Y": "years",
}


@dataclass(frozen=True)
class Tenor:
    """A nominal period such as '1D', '3M' or '2Y'."""

    amount: int
    unit: str

    def __post_init__(self):
        if self.unit not in _UNIT_NAMES:
            raise ValueError(
                f"Unsupported tenor unit: {self.unit}. Available: {list(_UNIT_NAMES)}"
            )
        if self.amount < 0:
            raise ValueError(f"Tenor amount must be non-negative, got {self.amount}")

    @classmethod
    def parse(cls, tenor: str) -> "Tenor":
        """Parse a tenor string (e.g., '1D', '3M', '2Y')."""
        t = tenor.upper().strip()
        if len(t) < 2 or not t[:-1].isdigit():
            raise ValueError(f"Unsupported tenor: {tenor}")
        return cls(int(t[:-1]), t[-1])

    def days(self) -> int:
        """Calendar days for short tenors (days/weeks)."""
        if self.unit == "D":
            return self.amount
        if self.unit == "W":
            return self.amount * 7
        raise ValueError(f"Tenor {self} is not a short tenor")

    def months(self) -> int:
        """Months for long tenors (months/years)."""
        if self.unit == "M":
            return self.amount
        if self.unit == "Y":
            return self.amount * 12
        raise ValueError(f"Tenor {self} is not expressed in months or years")

    def __str__(self) -> str:
        return f"{self.amount}{self.unit}"


TENOR_1D = Tenor(1, "D")
