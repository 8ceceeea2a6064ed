from .store import ArchiveCacheBackend, CacheBackend, DisabledCacheBackend

__all__ = ["ArchiveCacheBackend", "CacheBackend", "DisabledCacheBackend"]
