"""
Per-file result cache.

Uses diskcache for SQLite-based persistent caching. Entries hold unscored
traversal results, so a change of scoring configuration never needs a
cache flush; the key covers the file's path, module namespace, mtime and
size plus the package version.
"""

import hashlib
from pathlib import Path
from typing import Any, Optional

from diskcache import Cache

from . import __version__
from .logging_config import get_logger

logger = get_logger(__name__)


class MetricsCache:
    """
    SQLite-backed cache of per-file traversal results.

    Cache failures are logged and treated as misses.
    """

    def __init__(self, cache_dir: str = ".cognitive-cache", ttl_hours: int = 24, enabled: bool = True):
        self.enabled = enabled
        self.ttl_seconds = ttl_hours * 3600

        if self.enabled:
            self.cache: Optional[Cache] = Cache(cache_dir)
            logger.debug(f"Cache initialized at {cache_dir} with TTL={ttl_hours}h")
        else:
            self.cache = None
            logger.debug("Cache disabled")

    def file_key(self, filepath: Path, namespace: Optional[str] = None) -> Optional[str]:
        """Key for the current state of ``filepath`` as seen under ``namespace``.

        Cached results carry the module namespace and the path as given, so
        both are part of the key. None if the file cannot be stat'ed.
        """
        try:
            stat = filepath.stat()
        except OSError:
            return None
        key_data = (
            f"{filepath.resolve()}:{filepath}:{namespace or ''}:"
            f"{stat.st_mtime_ns}:{stat.st_size}:{__version__}"
        )
        return hashlib.sha256(key_data.encode()).hexdigest()

    def get(self, key: str) -> Optional[Any]:
        if not self.enabled or self.cache is None:
            return None

        try:
            value = self.cache.get(key)
        except Exception as e:
            logger.warning(f"Cache get failed: {e}")
            return None
        if value is not None:
            logger.debug(f"Cache hit: {key[:16]}...")
        return value

    def set(self, key: str, value: Any) -> None:
        if not self.enabled or self.cache is None:
            return

        try:
            self.cache.set(key, value, expire=self.ttl_seconds)
            logger.debug(f"Cache set: {key[:16]}...")
        except Exception as e:
            logger.warning(f"Cache set failed: {e}")

    def clear(self) -> None:
        if not self.enabled or self.cache is None:
            return
        self.cache.clear()
        logger.info("Cache cleared")

    def stats(self) -> dict:
        if not self.enabled or self.cache is None:
            return {"enabled": False}
        return {
            "enabled": True,
            "size": len(self.cache),
            "directory": self.cache.directory,
            "volume": self.cache.volume(),
        }

    def close(self) -> None:
        if self.cache is not None:
            self.cache.close()
