"""Trip query orchestration: one lookup per leg, audited, then enveloped."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .envelope_builder import build_trip_result

if TYPE_CHECKING:
    from datetime import date

    from acme_flights_core.lookup import FlightLookup
    from acme_flights_core.schemas import FlightOption, FlightSearchRequest

    from ..schemas.trips import TripSearchResult
    from .audit_counters import AuditCounters

logger = logging.getLogger(__name__)


class FlightDataUnavailableError(RuntimeError):
    """The flight store has not been populated yet."""

    def __init__(self) -> None:
        super().__init__("Flight DB has not been populated")


class TripQueryService:
    """Runs the outbound (and return) lookups for a trip query."""

    def __init__(self, lookup: FlightLookup, counters: AuditCounters) -> None:
        self._lookup = lookup
        self._counters = counters

    async def query_trip_flights(
        self, request: FlightSearchRequest
    ) -> TripSearchResult:
        """Search one leg for one-way trips, two for round trips.

        Raises :class:`FlightDataUnavailableError` before any lookup or audit
        when the flight data is not loaded. Lookup errors propagate as-is.
        """
        if not await self._lookup.is_populated():
            logger.warning(
                "Rejected trip query %s -> %s: flight data not populated",
                request.from_airport,
                request.to_airport,
            )
            raise FlightDataUnavailableError

        legs = [
            await self._search_leg(
                request.from_airport, request.to_airport, request.depart_date
            )
        ]
        if not request.one_way:
            # return leg flies the route in reverse
            legs.append(
                await self._search_leg(
                    request.to_airport,
                    request.from_airport,
                    request.return_date,  # type: ignore[arg-type]
                )
            )

        return build_trip_result(legs)

    async def _search_leg(
        self, from_airport: str, to_airport: str, departure_date: date
    ) -> list[FlightOption]:
        flights = await self._lookup.get_flights_by_airports_and_departure_date(
            from_airport, to_airport, departure_date
        )
        options = list(flights or ())
        self._counters.record_search(success=bool(options))
        logger.debug(
            "Leg %s -> %s on %s: %d flight(s)",
            from_airport,
            to_airport,
            departure_date,
            len(options),
        )
        return options
