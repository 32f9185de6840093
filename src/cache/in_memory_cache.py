"""In-memory cache implementation."""

import threading
from typing import Optional

from cache.cache import InsightsCache
from log import get_logger

logger = get_logger("cache.in_memory_cache")


class InMemoryCache(InsightsCache):
    """In-memory cache implementation.

    Lives as long as the process does. There is no eviction and no size
    bound, the number of currency pair and amount combinations is small.
    """

    def __init__(self) -> None:
        """Create a new instance of in-memory cache."""
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        """Get the value associated with the given key.

        Args:
            key: Cache key.

        Returns:
            The cached text or None when the key is not cached.
        """
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        """Set the value associated with the given key, last write wins.

        Args:
            key: Cache key.
            value: Text to be stored.
        """
        with self._lock:
            self._entries[key] = value
        logger.debug("Stored cache entry %s", key)

    def __len__(self) -> int:
        """Return number of cached entries."""
        with self._lock:
            return len(self._entries)

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True in all cases.
        """
        return True
