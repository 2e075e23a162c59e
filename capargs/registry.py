"""Append-only growable array shared by the flag and sub-command registries.

Storage grows in steps of the configured capacity: whenever the current
length is an exact multiple of the capacity (zero included) the backing
list is extended to ``length + capacity`` slots. With the default of five
that means 5, 10, 20, 40, ... slots. Lookups are plain linear scans.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from .errors import AllocationError

__all__ = ["DEFAULT_CAPACITY", "Registry"]

DEFAULT_CAPACITY = 5

T = TypeVar("T")

_LOGGER = logging.getLogger("capargs.registry")


class Registry(Generic[T]):
    """Ordered, append-only collection with first-match lookup."""

    __slots__ = ("_slots", "_len", "_capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"registry capacity must be positive, got {capacity}")
        self._slots: List[Optional[T]] = []
        self._len = 0
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated (zero before the first append)."""
        return len(self._slots)

    @property
    def step(self) -> int:
        return self._capacity

    def append(self, item: T) -> None:
        if self._len % self._capacity == 0:
            self._grow(self._len + self._capacity)
        self._slots[self._len] = item
        self._len += 1

    def _grow(self, size: int) -> None:
        try:
            extra: List[Optional[T]] = [None] * (size - len(self._slots))
            self._slots.extend(extra)
        except MemoryError as exc:
            _LOGGER.error("Failed to grow registry to %d slots", size)
            raise AllocationError(f"cannot grow registry to {size} slots") from exc
        # The next fill point is the new allocation size, so the step doubles.
        self._capacity = size
        _LOGGER.debug("Registry grown to %d slots", size)

    def find_by(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self:
            if predicate(item):
                return item
        return None

    def __iter__(self) -> Iterator[T]:
        for idx in range(self._len):
            yield self._slots[idx]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._len > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={self._len}, capacity={self.capacity})"
