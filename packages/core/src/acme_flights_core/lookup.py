"""Abstract flight lookup that trip queries delegate to."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from acme_flights_core.schemas import FlightOption


class FlightLookup(abc.ABC):
    """Read-only access to the scheduled flight data."""

    @abc.abstractmethod
    async def is_populated(self) -> bool:
        """Return True once flight data has been loaded."""

    @abc.abstractmethod
    async def get_flights_by_airports_and_departure_date(
        self,
        from_airport: str,
        to_airport: str,
        departure_date: date,
    ) -> list[FlightOption] | None:
        """Return flights for one direction departing on the given UTC day."""

    @abc.abstractmethod
    async def get_reward_miles(self, segment_id: str) -> int | None:
        """Return the mileage of a flight segment, or *None* if unknown."""
