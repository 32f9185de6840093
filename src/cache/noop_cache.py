"""No-operation cache implementation."""

from typing import Optional

from cache.cache import InsightsCache
from log import get_logger

logger = get_logger("cache.noop_cache")


class NoopCache(InsightsCache):
    """No-operation cache implementation, every lookup is a miss."""

    def get(self, key: str) -> Optional[str]:
        """Get the value associated with the given key.

        Returns:
            None in all cases.
        """
        return None

    def put(self, key: str, value: str) -> None:
        """Ignore the value."""
        logger.debug("Caching is disabled, dropping entry %s", key)

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True in all cases.
        """
        return True
