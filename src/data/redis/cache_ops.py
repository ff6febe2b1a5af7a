import json
from typing import Any
from src.data.redis.connection import redis_connection
from src.data.redis.cache_keys import CacheKeys, TTL
from src.utils.logger import get_current_logger


async def get_cached_value(key: str) -> Any | None:
    """
    Get value from Redis cache (async).

    Args:
        key: Cache key

    Returns:
        Cached value or None if not found or Redis is unavailable
    """
    logger = get_current_logger()
    try:
        redis = await redis_connection.get_client()
        value = await redis.get(key)

        if value is None:
            return None

        try:
            return json.loads(value)
        except (json.JSONDecodeError, TypeError):
            return value

    except Exception as e:
        logger.error(f"Failed to get cached value for key '{key}': {e}")
        return None


async def set_cached_value(key: str, value: Any, ttl: int = None) -> bool:
    """
    Set value in Redis cache (async).

    Args:
        key: Cache key
        value: Value to cache (will be JSON-encoded if not string)
        ttl: Time to live in seconds (optional)

    Returns:
        True if successful, False otherwise
    """
    logger = get_current_logger()
    try:
        redis = await redis_connection.get_client()

        if not isinstance(value, str):
            value = json.dumps(value)

        if ttl:
            await redis.setex(key, ttl, value)
        else:
            await redis.set(key, value)

        logger.debug(f"Cached value for key '{key}' (TTL: {ttl}s)")
        return True

    except Exception as e:
        logger.error(f"Failed to set cached value for key '{key}': {e}")
        return False


async def delete_cached_value(key: str) -> bool:
    """
    Delete value from Redis cache (async).

    Returns:
        True if deleted, False if not found or error
    """
    logger = get_current_logger()
    try:
        redis = await redis_connection.get_client()
        result = await redis.delete(key)
        return result > 0

    except Exception as e:
        logger.error(f"Failed to delete cached value for key '{key}': {e}")
        return False


async def get_cached_product(code: str) -> dict | None:
    """Cached ``Product.to_dict()`` payload for a code, if any."""
    return await get_cached_value(CacheKeys.product_by_code(code))


async def cache_product(code: str, product_dict: dict) -> bool:
    """
    Cache a product read from the database.

    Skipped while the product carries a write marker: the row may have been
    read before a concurrent update committed.
    """
    if await get_cached_value(CacheKeys.product_write_guard(code)):
        get_current_logger().debug(f"Product {code} written recently, not caching")
        return False
    return await set_cached_value(CacheKeys.product_by_code(code), product_dict, ttl=TTL.PRODUCT)


async def evict_products(codes: list[str]) -> int:
    """
    Drop cached entries for the given product codes. Returns how many existed.

    Each code also gets a short-lived write marker so that a read racing
    with the write does not put the old row back.
    """
    evicted = 0
    for code in codes:
        await set_cached_value(CacheKeys.product_write_guard(code), "1", ttl=TTL.PRODUCT_WRITE_GUARD)
        if await delete_cached_value(CacheKeys.product_by_code(code)):
            evicted += 1
    return evicted
