"""Cache providers.

MemoryCacheProvider is a dict-based cache: fast, but not shared across
processes.  For multi-worker deployments, swap in a Redis adapter
implementing ICacheProvider without changing the shows service.
"""

from liveshows.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
