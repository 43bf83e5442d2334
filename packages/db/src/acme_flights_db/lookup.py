"""SQL-backed flight lookup."""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import contains_eager

from acme_flights_core.lookup import FlightLookup
from acme_flights_core.schemas import FlightOption, FlightSegmentInfo

from .models import Flight, FlightSegment

if TYPE_CHECKING:
    from datetime import date

    from sqlalchemy.ext.asyncio import AsyncSession


class SqlFlightLookup(FlightLookup):
    """Answers flight lookups from the ``flights`` / ``flight_segments`` tables."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def is_populated(self) -> bool:
        count = await self._db.scalar(select(func.count()).select_from(Flight))
        return bool(count)

    async def get_flights_by_airports_and_departure_date(
        self,
        from_airport: str,
        to_airport: str,
        departure_date: date,
    ) -> list[FlightOption]:
        day_start = datetime.combine(departure_date, time.min, tzinfo=UTC)
        day_end = day_start + timedelta(days=1)

        stmt = (
            select(Flight)
            .join(Flight.segment)
            .options(contains_eager(Flight.segment))
            .where(
                FlightSegment.origin_port == from_airport,
                FlightSegment.dest_port == to_airport,
                Flight.scheduled_departure_time >= day_start,
                Flight.scheduled_departure_time < day_end,
            )
            .order_by(Flight.scheduled_departure_time)
        )

        result = await self._db.execute(stmt)
        flights = result.scalars().unique().all()
        return [self._to_flight_option(f) for f in flights]

    async def get_reward_miles(self, segment_id: str) -> int | None:
        return await self._db.scalar(
            select(FlightSegment.miles).where(FlightSegment.id == segment_id)
        )

    @staticmethod
    def _to_flight_option(flight: Flight) -> FlightOption:
        """Map a DB Flight (with its segment loaded) to the API schema."""
        segment = flight.segment
        return FlightOption(
            id=str(flight.id),
            flight_segment_id=flight.flight_segment_id,
            scheduled_departure_time=flight.scheduled_departure_time,
            scheduled_arrival_time=flight.scheduled_arrival_time,
            first_class_base_cost=flight.first_class_base_cost,
            economy_class_base_cost=flight.economy_class_base_cost,
            num_first_class_seats=flight.num_first_class_seats,
            num_economy_class_seats=flight.num_economy_class_seats,
            airplane_type_id=flight.airplane_type_id,
            flight_segment=FlightSegmentInfo(
                id=segment.id,
                origin_port=segment.origin_port,
                dest_port=segment.dest_port,
                miles=segment.miles,
            ),
        )
