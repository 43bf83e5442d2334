"""Flight store loader and SQL lookup against SQLite."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from acme_flights_db import models
from acme_flights_db.loader import (
    MIN_DURATION_MINUTES,
    build_flight_schedule,
    cli,
    create_schema,
    flight_duration,
    load_flights,
    parse_segments,
    store_status,
)
from acme_flights_db.lookup import SqlFlightLookup

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    from sqlalchemy.ext.asyncio import AsyncSession

SEGMENTS = [
    {"id": "AA0", "originPort": "SFO", "destPort": "JFK", "miles": 2586},
    {"id": "AA1", "originPort": "jfk", "destPort": "sfo", "miles": 2586},
]
START = date(2024, 6, 1)


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession]:
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_schema(engine)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as db:
        yield db
    await engine.dispose()


# ---------------------------------------------------------------------------
# Schedule building
# ---------------------------------------------------------------------------


def test_parse_segments_normalises_codes():
    segments = parse_segments(SEGMENTS)

    assert [(s.id, s.origin_port, s.dest_port) for s in segments] == [
        ("AA0", "SFO", "JFK"),
        ("AA1", "JFK", "SFO"),
    ]


def test_schedule_has_one_flight_per_segment_per_day():
    segments = parse_segments(SEGMENTS)

    flights = build_flight_schedule(segments, START, days=3)

    assert len(flights) == 6
    departures = sorted({f.scheduled_departure_time for f in flights})
    assert departures == [
        datetime(2024, 6, day, 8, 0, tzinfo=UTC) for day in (1, 2, 3)
    ]
    for flight in flights:
        assert flight.scheduled_arrival_time - flight.scheduled_departure_time == (
            flight_duration(2586)
        )
        assert flight.airplane_type_id == "B747"


def test_flight_duration_from_miles():
    assert flight_duration(2586) == timedelta(minutes=310)
    assert flight_duration(100) == timedelta(minutes=MIN_DURATION_MINUTES)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


async def test_load_and_status(session):
    assert await store_status(session) == {"segments": 0, "flights": 0}

    added = await load_flights(session, SEGMENTS, START, days=3)

    assert added == (2, 6)
    assert await store_status(session) == {"segments": 2, "flights": 6}


async def test_load_skips_when_populated_unless_forced(session):
    await load_flights(session, SEGMENTS, START, days=3)

    assert await load_flights(session, SEGMENTS, START, days=5) == (0, 0)
    assert await load_flights(session, SEGMENTS, START, days=5, force=True) == (2, 10)
    assert await store_status(session) == {"segments": 2, "flights": 10}


# ---------------------------------------------------------------------------
# SQL lookup
# ---------------------------------------------------------------------------


async def test_is_populated(session):
    lookup = SqlFlightLookup(session)

    assert await lookup.is_populated() is False
    await load_flights(session, SEGMENTS, START, days=1)
    assert await lookup.is_populated() is True


async def test_flights_by_route_and_day(session):
    await load_flights(session, SEGMENTS, START, days=3)
    lookup = SqlFlightLookup(session)

    flights = await lookup.get_flights_by_airports_and_departure_date(
        "SFO", "JFK", date(2024, 6, 2)
    )

    assert len(flights) == 1
    flight = flights[0]
    assert flight.flight_segment_id == "AA0"
    assert flight.scheduled_departure_time.date() == date(2024, 6, 2)
    assert flight.scheduled_departure_time.hour == 8
    assert flight.flight_segment is not None
    assert flight.flight_segment.origin_port == "SFO"
    assert flight.flight_segment.dest_port == "JFK"
    assert flight.flight_segment.miles == 2586


async def test_reverse_route_uses_its_own_segment(session):
    await load_flights(session, SEGMENTS, START, days=1)
    lookup = SqlFlightLookup(session)

    flights = await lookup.get_flights_by_airports_and_departure_date(
        "JFK", "SFO", START
    )

    assert [f.flight_segment_id for f in flights] == ["AA1"]


async def test_no_flights_outside_schedule(session):
    await load_flights(session, SEGMENTS, START, days=1)
    lookup = SqlFlightLookup(session)

    assert await lookup.get_flights_by_airports_and_departure_date(
        "SFO", "JFK", date(2024, 6, 10)
    ) == []
    assert await lookup.get_flights_by_airports_and_departure_date(
        "SFO", "LAX", START
    ) == []


async def test_reward_miles(session):
    await load_flights(session, SEGMENTS, START, days=1)
    lookup = SqlFlightLookup(session)

    assert await lookup.get_reward_miles("AA0") == 2586
    assert await lookup.get_reward_miles("ZZ9") is None


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def test_cli_init_load_status(tmp_path: Path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'flights.db'}"
    seed = tmp_path / "segments.json"
    seed.write_text(json.dumps(SEGMENTS))
    runner = CliRunner()

    init = runner.invoke(cli, ["--database-url", url, "init-db"])
    assert init.exit_code == 0, init.output

    empty = runner.invoke(cli, ["--database-url", url, "status"])
    assert "populated=no" in empty.output

    loaded = runner.invoke(
        cli,
        ["--database-url", url, "load", str(seed), "--days", "2", "--start", "2024-06-01"],
    )
    assert loaded.exit_code == 0, loaded.output
    assert "Loaded 2 segment(s) and 4 flight(s)." in loaded.output

    again = runner.invoke(cli, ["--database-url", url, "load", str(seed)])
    assert "already populated" in again.output

    status = runner.invoke(cli, ["--database-url", url, "status"])
    assert "segments=2 flights=4 populated=yes" in status.output


def test_models_export_only_mapped_classes():
    assert sorted(models.__all__) == ["Base", "Flight", "FlightSegment"]
    assert set(models.Base.metadata.tables) == {"flights", "flight_segments"}
