from __future__ import annotations

import logging
import time
from typing import Optional

import redis
from redis import Redis

from relaydesk.core.config import settings

logger = logging.getLogger("relaydesk.redis")

_client: Optional[Redis] = None
_failed_at: Optional[float] = None


def get_redis() -> Optional[Redis]:
    """Return a singleton Redis client (or None if not reachable).

    After a failed connect, callers get None without a new attempt until
    REDIS_RETRY_SECONDS have passed.
    """
    global _client, _failed_at
    if _client is not None:
        return _client
    if _failed_at is not None and time.monotonic() - _failed_at < settings.REDIS_RETRY_SECONDS:
        return None
    try:
        client = redis.Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        )
        client.ping()
    except Exception as exc:
        logger.warning("Redis unavailable, retrying in %ss: %s", settings.REDIS_RETRY_SECONDS, exc)
        _failed_at = time.monotonic()
        return None
    _client = client
    _failed_at = None
    return _client
