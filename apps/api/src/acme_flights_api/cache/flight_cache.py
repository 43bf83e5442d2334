"""Read-through Redis cache in front of a flight lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError

from acme_flights_core.lookup import FlightLookup
from acme_flights_core.schemas import FlightOption

from .cache_keys import flights_key, reward_miles_key
from .redis_client import cache_get, cache_set

if TYPE_CHECKING:
    from datetime import date

    import redis.asyncio as redis

logger = logging.getLogger(__name__)


class CachedFlightLookup(FlightLookup):
    """Caches flight lists and segment miles; readiness is always live.

    Redis failures degrade to the wrapped lookup. Errors raised by the
    wrapped lookup are not caught.
    """

    def __init__(self, inner: FlightLookup, redis: redis.Redis, ttl: int) -> None:
        self._inner = inner
        self._redis = redis
        self._ttl = ttl

    async def is_populated(self) -> bool:
        return await self._inner.is_populated()

    async def get_flights_by_airports_and_departure_date(
        self,
        from_airport: str,
        to_airport: str,
        departure_date: date,
    ) -> list[FlightOption]:
        key = flights_key(from_airport, to_airport, departure_date.isoformat())
        cached = await self._get(key)
        if cached is not None:
            return [FlightOption.model_validate(item) for item in cached]

        flights = list(
            await self._inner.get_flights_by_airports_and_departure_date(
                from_airport, to_airport, departure_date
            )
            or ()
        )
        await self._set(
            key, [f.model_dump(mode="json", by_alias=True) for f in flights]
        )
        return flights

    async def get_reward_miles(self, segment_id: str) -> int | None:
        key = reward_miles_key(segment_id)
        cached = await self._get(key)
        if cached is not None:
            return int(cached)

        miles = await self._inner.get_reward_miles(segment_id)
        if miles is not None:
            await self._set(key, miles)
        return miles

    async def _get(self, key: str) -> Any | None:
        try:
            return await cache_get(self._redis, key)
        except RedisError as exc:
            logger.warning("Flight cache read failed for %s: %s", key, exc)
            return None

    async def _set(self, key: str, value: Any) -> None:
        try:
            await cache_set(self._redis, key, value, self._ttl)
        except RedisError as exc:
            logger.warning("Flight cache write failed for %s: %s", key, exc)
