"""FastAPI dependency injection providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from acme_flights_core.lookup import FlightLookup
from acme_flights_db.database import get_db as _db_dependency
from acme_flights_db.lookup import SqlFlightLookup

from .cache.flight_cache import CachedFlightLookup
from .cache.redis_client import get_redis_pool
from .config import settings
from .services.audit_counters import AuditCounters
from .services.trip_query_service import TripQueryService

# Re-export the DB dependency unchanged.
get_db = _db_dependency

DbDep = Annotated[AsyncSession, Depends(get_db)]


def get_audit_counters(request: Request) -> AuditCounters:
    """Return the application's single AuditCounters instance."""
    return request.app.state.audit_counters


async def get_flight_lookup(db: DbDep) -> FlightLookup:
    """SQL flight lookup, behind the Redis cache when it is enabled."""
    lookup = SqlFlightLookup(db)
    if not settings.flight_cache_enabled:
        return lookup
    pool = await get_redis_pool()
    return CachedFlightLookup(lookup, pool, ttl=settings.flight_cache_ttl)


LookupDep = Annotated[FlightLookup, Depends(get_flight_lookup)]
CountersDep = Annotated[AuditCounters, Depends(get_audit_counters)]


def get_trip_query_service(
    lookup: LookupDep,
    counters: CountersDep,
) -> TripQueryService:
    return TripQueryService(lookup, counters)
