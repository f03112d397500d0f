"""
Services - Cache Service

TTL cache for page and template listings, keyed by store revision.
"""

from typing import Any, Optional
from cachetools import TTLCache
import threading

from form_builder.config import get_settings


class CacheService:
    """TTL-based listing cache."""

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._lock = threading.Lock()
        self._cache = TTLCache(
            maxsize=self.settings.store.cache_max_entries,
            ttl=self.settings.store.cache_ttl,
        )

    def clear_all(self) -> None:
        with self._lock:
            self._cache.clear()

    def get_versioned(self, key: str, current_revision: int) -> Optional[Any]:
        """
        Revision-aware get: returns the cached value only if it was stored
        at current_revision. A stale entry is dropped.

        Args:
            key: Cache key
            current_revision: Store revision the caller is reading at

        Returns:
            Cached value if the revision matches, None otherwise
        """
        if not self.settings.store.cache_enabled:
            return None

        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            cached_revision, data = entry
            if cached_revision == current_revision:
                return data
            del self._cache[key]
            return None

    def set_versioned(self, key: str, value: Any, revision: int) -> None:
        if not self.settings.store.cache_enabled:
            return

        with self._lock:
            self._cache[key] = (revision, value)

    def get_stats(self) -> dict:
        return {
            "size": len(self._cache),
            "maxsize": self._cache.maxsize,
            "ttl": self._cache.ttl,
            "enabled": self.settings.store.cache_enabled,
        }
