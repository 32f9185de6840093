"""Abstract class that is parent for all travel insights cache implementations."""

from abc import ABC, abstractmethod
from typing import Optional

import constants


class InsightsCache(ABC):
    """Abstract base class for travel insights cache.

    Entries map a cache key (see `construct_key`) to the raw text returned by
    the model. Entries never expire.
    """

    @staticmethod
    def construct_key(source: str, target: str, amount: int | float) -> str:
        """Construct key from source currency, target currency and amount.

        The displayed converted amount is not part of the key, queries that
        differ only in its formatting share one entry.
        """
        return f"{constants.CACHE_KEY_VERSION}-{source}-{target}-{amount}"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value associated with the given key.

        Args:
            key: Cache key.

        Returns:
            The cached text or None when the key is not cached.
        """

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Set the value associated with the given key.

        Args:
            key: Cache key.
            value: Text to be stored, an existing value is replaced.
        """

    @abstractmethod
    def ready(self) -> bool:
        """Check if the cache is ready."""
