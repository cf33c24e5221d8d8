"""
Registry of rate indices keyed by unique name.

The registry is a read-only table built once during process setup. The
module keeps a default registry, empty until the application installs one
with ``set_default_registry``; ``OvernightIndex.of`` resolves names against
it unless another registry is passed explicitly.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Type, TypeVar

from .base import RateIndex
from .errors import IndexLookupError

logger = logging.getLogger(__name__)

IndexT = TypeVar("IndexT", bound=RateIndex)


class RateIndexRegistry:
    """Read-only mapping from unique index name to index instance."""

    def __init__(self, indices: Iterable[RateIndex] = ()):
        table = {}
        for index in indices:
            if index.name in table:
                raise ValueError(f"Duplicate rate index name: {index.name}")
            table[index.name] = index
        self._indices = MappingProxyType(table)
        logger.debug("Built rate index registry with %s indices", len(table))

    def lookup(self, name: str, index_class: Optional[Type[IndexT]] = None) -> IndexT:
        """
        Find an index by name.

        Args:
            name: Unique index name, such as 'GBP-SONIA'
            index_class: Restrict the match to indices of this class

        Returns:
            The registered index

        Raises:
            IndexLookupError: If no index of the requested class has the name
        """
        index = self._indices.get(name)
        if index is None:
            logger.warning("Rate index lookup failed for %r", name)
            raise IndexLookupError(name)
        if index_class is not None and not isinstance(index, index_class):
            logger.warning(
                "Rate index %r is a %s, not a %s",
                name,
                type(index).__name__,
                index_class.__name__,
            )
            raise IndexLookupError(
                name, f"Rate index {name} is not a {index_class.__name__}"
            )
        return index

    def names(self) -> List[str]:
        """Registered names, sorted."""
        return sorted(self._indices)

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def __iter__(self) -> Iterator[RateIndex]:
        return iter(self._indices.values())

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"RateIndexRegistry({self.names()!r})"


_DEFAULT_REGISTRY = RateIndexRegistry()


def get_default_registry() -> RateIndexRegistry:
    """Get the process-wide registry used by name lookups."""
    return _DEFAULT_REGISTRY


def set_default_registry(registry: RateIndexRegistry) -> None:
    """Install the process-wide registry used by name lookups."""
    global _DEFAULT_REGISTRY
    if not isinstance(registry, RateIndexRegistry):
        raise TypeError(f"Expected a RateIndexRegistry, got {type(registry).__name__}")
    _DEFAULT_REGISTRY = registry
    logger.info("Default rate index registry set with %s indices", len(registry))
