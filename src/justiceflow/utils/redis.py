"""Redis client used by the redis storage backend."""

import logging
from typing import Optional

import redis

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None


def get_redis_client(url: Optional[str] = None) -> redis.Redis:
    """Get or create the shared Redis client.

    Collection blobs are plain JSON strings, so responses are decoded to
    ``str``. Connection errors surface on first use, not here.

    Args:
        url: Redis URL; only used when the client is first created.
            Defaults to ``settings.REDIS_URL``

    Returns:
        Redis client
    """
    global _redis_client

    if _redis_client is None:
        from ..config import settings
        url = url or settings.REDIS_URL
        _redis_client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        )
        logger.info(f"[redis] Client created for {url}")

    return _redis_client


def close_redis():
    """Close the shared client; the next call to get_redis_client reconnects."""
    global _redis_client

    if _redis_client is not None:
        _redis_client.close()
        _redis_client = None
        logger.info("[redis] Client closed")


__all__ = ["get_redis_client", "close_redis"]
