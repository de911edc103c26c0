"""Cache management for dictionary lookups.

Merriam-Webster lookups are cached in a requests_cache SQLite database. A bad
cached answer would keep rejecting (or accepting) the same word, so entries
for a single word can be busted.
"""

from datetime import timedelta
from pathlib import Path
from urllib.parse import urlparse

import requests_cache
from loguru import logger

CACHE_NAME = "word_scramble_cache"
CACHE_BACKEND = "sqlite"
CACHE_EXPIRE_AFTER = timedelta(days=30)


def create_cached_session(cache_dir: str = ".cache/") -> requests_cache.CachedSession:
    """Create the cached HTTP session used for dictionary lookups."""
    path = Path(cache_dir)
    path.mkdir(parents=True, exist_ok=True)
    return requests_cache.CachedSession(
        str(path / CACHE_NAME),
        backend=CACHE_BACKEND,
        expire_after=CACHE_EXPIRE_AFTER,
    )


class CacheManager:
    """Manager for dictionary lookup cache operations."""

    def __init__(self, cache_dir: str = ".cache/"):
        self.cache_dir = cache_dir
        self.session = create_cached_session(cache_dir)

    def bust_word_cache(self, word: str) -> int:
        """Remove every cached lookup for a word.

        Args:
            word: The word to remove from cache

        Returns:
            Number of cache entries deleted

        Raises:
            ValueError: If word is empty or whitespace
        """
        if not word or not word.strip():
            msg = "word cannot be empty"
            raise ValueError(msg)

        word = word.strip().lower()
        logger.debug(f"Busting cache for word: '{word}'")

        cache = self.session.cache
        keys_to_delete = [
            key
            for key, response in cache.responses.items()
            if self._is_lookup_for(response.url, word)
        ]

        if keys_to_delete:
            cache.delete(*keys_to_delete)
            logger.info(f"Deleted {len(keys_to_delete)} cache entries for word '{word}'")
        else:
            logger.info(f"No cache entries found for word '{word}'")

        return len(keys_to_delete)

    @staticmethod
    def _is_lookup_for(url: str, word: str) -> bool:
        # Lookup URLs end in /json/<word>
        path = urlparse(url).path.lower()
        return path.rstrip("/").endswith(f"/{word}")

    def clear_all_cache(self) -> None:
        """Remove all cached lookups."""
        logger.debug("Clearing all cache entries")
        self.session.cache.clear()
        logger.info("All cache entries cleared")

    def get_cache_info(self) -> dict:
        """Return basic statistics about the cache."""
        return {
            "cache_name": CACHE_NAME,
            "cache_dir": self.cache_dir,
            "backend": CACHE_BACKEND,
            "response_count": len(self.session.cache.responses),
            "expire_after": str(CACHE_EXPIRE_AFTER),
        }
