"""Interest Rate Index Definitions.

This package describes overnight rate indices (SONIA, ESTR, SOFR, ...) and
derives the fixing, publication, effective and maturity dates of the rate
from a QuantLib holiday calendar.

Key modules:
- index: Overnight index, registry and errors
- conventions: Calendars, day count conventions, tenors and enums
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "index",
    "conventions",
]
