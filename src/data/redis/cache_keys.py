class TTL:
    """Time-to-Live constants for different cache types."""
    PRODUCT = 300           # 5 minutes - product details
    PRODUCT_WRITE_GUARD = 5  # reads skip caching this long after a write


class CacheKeys:
    """Cache key generators for all Redis keys."""

    @staticmethod
    def product_by_code(code: str) -> str:
        """Cache key for product by code."""
        return f"product:code:{code}"

    @staticmethod
    def product_write_guard(code: str) -> str:
        """Marker set when a product was just written."""
        return f"product:written:{code}"
