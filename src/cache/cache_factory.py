"""Cache factory class."""

import constants
from cache.cache import InsightsCache
from cache.in_memory_cache import InMemoryCache
from cache.noop_cache import NoopCache
from log import get_logger
from models.config import InsightsCacheConfiguration

logger = get_logger("cache.cache_factory")


# pylint: disable=R0903
class CacheFactory:
    """Cache factory class."""

    @staticmethod
    def insights_cache(config: InsightsCacheConfiguration) -> InsightsCache:
        """Create an instance of cache based on loaded configuration.

        Returns:
            An instance of `InsightsCache` (either `InMemoryCache` or `NoopCache`).
        """
        logger.info("Creating cache instance of type %s", config.type)
        match config.type:
            case constants.CACHE_TYPE_MEMORY:
                return InMemoryCache()
            case constants.CACHE_TYPE_NOOP:
                return NoopCache()
            case _:
                raise ValueError(
                    f"Invalid cache type: {config.type}. "
                    f"Use '{constants.CACHE_TYPE_MEMORY}' or "
                    f"'{constants.CACHE_TYPE_NOOP}' options."
                )
