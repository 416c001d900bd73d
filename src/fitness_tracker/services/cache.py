"""Expiring key-value cache for food lookups."""

import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Protocol


class Cache(Protocol):
    """Cache interface for lookup results."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ``ttl_seconds``."""


@dataclass
class InMemoryCache(Cache):
    """Process-local cache that drops the oldest key once ``max_entries`` is hit."""

    max_entries: int = 1024
    _entries: OrderedDict[str, tuple[float, object]] = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if time.monotonic() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value with a TTL."""
        self._entries.pop(key, None)
        self._entries[key] = (time.monotonic() + ttl_seconds, value)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
