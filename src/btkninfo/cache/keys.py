"""Cache key builders for consistent key formatting."""

import hashlib


class CacheKeys:
    """Cache key builders for consistent key formatting."""

    PREFIX = "btkninfo"

    @staticmethod
    def _digest(url: str) -> str:
        # URLs can be arbitrarily long; hash for consistent key length
        return hashlib.md5(url.encode()).hexdigest()

    @classmethod
    def document(cls, url: str) -> str:
        """Key for a fetched token list document."""
        return f"{cls.PREFIX}:document:{cls._digest(url)}"

    @classmethod
    def resource(cls, url: str) -> str:
        """Key for a fetched image resource."""
        return f"{cls.PREFIX}:resource:{cls._digest(url)}"
