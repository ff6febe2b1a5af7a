"""Redis cache for product lookups."""

from src.data.redis.connection import RedisConnection, redis_connection
from src.data.redis.cache_keys import CacheKeys, TTL

__all__ = ["RedisConnection", "redis_connection", "CacheKeys", "TTL"]
