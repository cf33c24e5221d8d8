"""Rate index definitions and name lookup."""

from .base import RateIndex
from .errors import IndexLookupError, IndexValidationError, InvalidArgumentError, RateIndexError
from .overnight import OvernightIndex, OvernightIndexBuilder
from .registry import RateIndexRegistry, get_default_registry, set_default_registry

__all__ = [
    "RateIndex",
    "OvernightIndex",
    "OvernightIndexBuilder",
    "RateIndexRegistry",
    "get_default_registry",
    "set_default_registry",
    "RateIndexError",
    "IndexValidationError",
    "IndexLookupError",
    "InvalidArgumentError",
]
