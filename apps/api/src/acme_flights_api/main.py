"""FastAPI application factory."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from acme_flights_api.config import settings

# Propagate DB URL so acme_flights_db.database picks it up via os.getenv.
os.environ.setdefault("DATABASE_URL", settings.database_url)

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from acme_flights_api.cache.redis_client import close_redis, init_redis
from acme_flights_api.routers import audit, flights
from acme_flights_api.routers import status as status_router
from acme_flights_api.schemas.common import ErrorResponse
from acme_flights_api.services.audit_counters import AuditCounters
from acme_flights_api.services.trip_query_service import FlightDataUnavailableError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import Request


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage startup / shutdown resources."""
    if settings.flight_cache_enabled:
        await init_redis(settings.redis_url)
    yield
    await close_redis()


async def _flight_data_unavailable(
    request: Request, exc: FlightDataUnavailableError
) -> JSONResponse:
    body = ErrorResponse(detail=str(exc), code="FLIGHT_DATA_UNAVAILABLE")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Acme Flights API",
        version="0.1.0",
        lifespan=_lifespan,
    )

    # One set of audit counters for the lifetime of the app.
    app.state.audit_counters = AuditCounters()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FlightDataUnavailableError, _flight_data_unavailable)

    # Routers
    _prefix = settings.route_prefix
    app.include_router(status_router.router, prefix=_prefix)
    app.include_router(flights.router, prefix=_prefix)
    app.include_router(audit.router, prefix=_prefix)

    return app


app = create_app()
