"""CLI that creates the flight store schema and schedules flights from seed data."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import UTC, date, datetime, time, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click
from sqlalchemy import delete, func, select

from .database import DATABASE_URL, make_engine, make_session_factory, session_scope
from .models import Base, Flight, FlightSegment

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

logger = logging.getLogger(__name__)

FIRST_CLASS_BASE_COST = 500.0
ECONOMY_CLASS_BASE_COST = 200.0
NUM_FIRST_CLASS_SEATS = 10
NUM_ECONOMY_CLASS_SEATS = 200
AIRPLANE_TYPE_ID = "B747"
DEPARTURE_TIME = time(8, 0)
CRUISE_SPEED_MPH = 500
MIN_DURATION_MINUTES = 60


def parse_segments(data: Sequence[dict[str, Any]]) -> list[FlightSegment]:
    """Build FlightSegment rows from seed JSON items."""
    return [
        FlightSegment(
            id=item["id"],
            origin_port=item["originPort"].upper(),
            dest_port=item["destPort"].upper(),
            miles=int(item["miles"]),
        )
        for item in data
    ]


def flight_duration(miles: int) -> timedelta:
    """Block time for a segment, derived from its mileage."""
    minutes = max(MIN_DURATION_MINUTES, round(miles / CRUISE_SPEED_MPH * 60))
    return timedelta(minutes=minutes)


def build_flight_schedule(
    segments: Sequence[FlightSegment],
    start: date,
    days: int,
) -> list[Flight]:
    """Schedule one flight per segment per day for *days* days from *start*."""
    flights: list[Flight] = []
    for offset in range(days):
        departure = datetime.combine(
            start + timedelta(days=offset), DEPARTURE_TIME, tzinfo=UTC
        )
        for segment in segments:
            flights.append(
                Flight(
                    flight_segment_id=segment.id,
                    scheduled_departure_time=departure,
                    scheduled_arrival_time=departure + flight_duration(segment.miles),
                    first_class_base_cost=FIRST_CLASS_BASE_COST,
                    economy_class_base_cost=ECONOMY_CLASS_BASE_COST,
                    num_first_class_seats=NUM_FIRST_CLASS_SEATS,
                    num_economy_class_seats=NUM_ECONOMY_CLASS_SEATS,
                    airplane_type_id=AIRPLANE_TYPE_ID,
                )
            )
    return flights


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def load_flights(
    session: AsyncSession,
    segments_data: Sequence[dict[str, Any]],
    start: date,
    days: int,
    force: bool = False,
) -> tuple[int, int]:
    """Insert segments and their schedule; return ``(segments, flights)`` added."""
    existing = await session.scalar(select(func.count()).select_from(FlightSegment))
    if existing and not force:
        logger.info("Flight segments already loaded (%d rows), skipping.", existing)
        return 0, 0
    if existing:
        await session.execute(delete(Flight))
        await session.execute(delete(FlightSegment))
        session.expunge_all()
        logger.info("Removed %d existing flight segments", existing)

    segments = parse_segments(segments_data)
    session.add_all(segments)
    flights = build_flight_schedule(segments, start, days)
    session.add_all(flights)
    await session.flush()

    logger.info(
        "Loaded %d segments and %d flights (%s + %d days)",
        len(segments),
        len(flights),
        start,
        days,
    )
    return len(segments), len(flights)


async def store_status(session: AsyncSession) -> dict[str, int]:
    """Row counts of the flight store."""
    segments = await session.scalar(select(func.count()).select_from(FlightSegment))
    flights = await session.scalar(select(func.count()).select_from(Flight))
    return {"segments": segments or 0, "flights": flights or 0}


T = TypeVar("T")


async def _with_session(
    database_url: str,
    action: Callable[[AsyncSession], Awaitable[T]],
) -> T:
    engine = make_engine(database_url)
    try:
        async with session_scope(make_session_factory(engine)) as session:
            return await action(session)
    finally:
        await engine.dispose()


@click.group()
@click.option(
    "--database-url",
    envvar="DATABASE_URL",
    default=DATABASE_URL,
    show_default=True,
    help="SQLAlchemy async database URL",
)
@click.pass_context
def cli(ctx: click.Context, database_url: str) -> None:
    """Flight store management CLI."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    ctx.obj = database_url


@cli.command("init-db")
@click.pass_obj
def init_db(database_url: str) -> None:
    """Create the flight store tables."""

    async def _run() -> None:
        engine = make_engine(database_url)
        try:
            await create_schema(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    click.echo("Schema created.")


@cli.command("load")
@click.argument(
    "segments_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--days", default=30, show_default=True, type=click.IntRange(min=1))
@click.option("--start", default=None, help="First departure date (YYYY-MM-DD)")
@click.option("--force", is_flag=True, help="Replace existing segments and flights")
@click.pass_obj
def load(
    database_url: str,
    segments_file: Path,
    days: int,
    start: str | None,
    force: bool,
) -> None:
    """Load flight segments from SEGMENTS_FILE and schedule their flights."""
    with segments_file.open() as f:
        data = json.load(f)
    first_day = date.fromisoformat(start) if start else datetime.now(UTC).date()

    segments, flights = asyncio.run(
        _with_session(
            database_url,
            lambda session: load_flights(session, data, first_day, days, force),
        )
    )
    if segments == 0:
        click.echo("Flight store already populated, nothing loaded.")
        return
    click.echo(f"Loaded {segments} segment(s) and {flights} flight(s).")


@cli.command("status")
@click.pass_obj
def status(database_url: str) -> None:
    """Show flight store row counts."""
    counts = asyncio.run(_with_session(database_url, store_status))
    populated = "yes" if counts["flights"] else "no"
    click.echo(
        f"segments={counts['segments']} flights={counts['flights']} "
        f"populated={populated}"
    )


if __name__ == "__main__":
    cli()
