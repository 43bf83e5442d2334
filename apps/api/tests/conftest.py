"""Shared fixtures for API tests."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING

import httpx
import pytest

from acme_flights_api.dependencies import get_flight_lookup
from acme_flights_api.main import create_app
from acme_flights_api.services.audit_counters import AuditCounters
from acme_flights_core.lookup import FlightLookup
from acme_flights_core.schemas import FlightOption, FlightSegmentInfo

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


class FakeFlightLookup(FlightLookup):
    """In-memory lookup that records every call it receives."""

    def __init__(self) -> None:
        self.populated = True
        self.flights: dict[tuple[str, str, date], list[FlightOption] | None] = {}
        self.miles: dict[str, int] = {}
        self.errors: dict[tuple[str, str, date], Exception] = {}
        self.calls: list[tuple[str, str, date]] = []
        self.populated_checks = 0

    async def is_populated(self) -> bool:
        self.populated_checks += 1
        return self.populated

    async def get_flights_by_airports_and_departure_date(
        self,
        from_airport: str,
        to_airport: str,
        departure_date: date,
    ) -> list[FlightOption] | None:
        key = (from_airport, to_airport, departure_date)
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        return self.flights.get(key, [])

    async def get_reward_miles(self, segment_id: str) -> int | None:
        return self.miles.get(segment_id)


@pytest.fixture
def make_flight():
    """Factory fixture for FlightOption instances."""
    counter = 0

    def _make(
        origin: str = "SFO",
        destination: str = "JFK",
        departure_date: date = date(2024, 6, 1),
        segment_id: str = "AA0",
        miles: int = 2586,
    ) -> FlightOption:
        nonlocal counter
        counter += 1
        departure = datetime.combine(
            departure_date, datetime.min.time(), tzinfo=UTC
        ) + timedelta(hours=6 + counter)
        return FlightOption(
            id=f"flight-{counter}",
            flight_segment_id=segment_id,
            scheduled_departure_time=departure,
            scheduled_arrival_time=departure + timedelta(hours=5),
            first_class_base_cost=500.0,
            economy_class_base_cost=200.0,
            num_first_class_seats=10,
            num_economy_class_seats=200,
            airplane_type_id="B747",
            flight_segment=FlightSegmentInfo(
                id=segment_id,
                origin_port=origin,
                dest_port=destination,
                miles=miles,
            ),
        )

    return _make


@pytest.fixture
def lookup() -> FakeFlightLookup:
    return FakeFlightLookup()


@pytest.fixture
def counters() -> AuditCounters:
    return AuditCounters()


@pytest.fixture
def app(lookup: FakeFlightLookup) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_flight_lookup] = lambda: lookup
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
