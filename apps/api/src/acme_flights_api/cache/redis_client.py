"""Redis connection pool for the flight lookup cache."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import urlsplit

import redis.asyncio as redis

logger = logging.getLogger(__name__)

redis_pool: redis.Redis | None = None


def _safe_url(url: str) -> str:
    """Drop credentials from a Redis URL before logging it."""
    parts = urlsplit(url)
    host = parts.hostname or ""
    port = f":{parts.port}" if parts.port else ""
    return f"{parts.scheme}://{host}{port}{parts.path}"


async def init_redis(url: str) -> None:
    """Create the shared Redis connection pool."""
    global redis_pool
    redis_pool = redis.from_url(url, decode_responses=True)
    logger.info("Redis pool initialised: %s", _safe_url(url))


async def close_redis() -> None:
    """Close the Redis pool if one was opened."""
    global redis_pool
    if redis_pool is None:
        return
    await redis_pool.aclose()
    redis_pool = None
    logger.info("Redis pool closed")


async def get_redis_pool() -> redis.Redis:
    """Return the active Redis connection (raises if not initialised)."""
    if redis_pool is None:
        msg = "Redis pool has not been initialised"
        raise RuntimeError(msg)
    return redis_pool


async def cache_get(pool: redis.Redis, key: str) -> Any | None:
    """Read and JSON-decode *key*; *None* on a miss."""
    raw = await pool.get(key)
    if raw is None:
        return None
    return json.loads(raw)


async def cache_set(pool: redis.Redis, key: str, value: Any, ttl: int) -> None:
    """JSON-encode *value* under *key* for *ttl* seconds."""
    await pool.set(key, json.dumps(value, default=str), ex=ttl)
