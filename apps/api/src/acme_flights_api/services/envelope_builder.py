"""Builds the paginated trip response envelope."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..schemas.trips import TripLegPage, TripSearchResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from acme_flights_core.schemas import FlightOption

# Every leg is returned as a single, complete page.
NUM_PAGES = 1
CURRENT_PAGE = 0
HAS_MORE_OPTIONS = False
PAGE_SIZE = 10


def build_leg_page(flights: Sequence[FlightOption] | None) -> TripLegPage:
    """Wrap one leg's flights in a page descriptor."""
    return TripLegPage(
        num_pages=NUM_PAGES,
        flight_options=list(flights or ()),
        current_page=CURRENT_PAGE,
        has_more_options=HAS_MORE_OPTIONS,
        page_size=PAGE_SIZE,
    )


def build_trip_result(
    legs: Sequence[Sequence[FlightOption] | None],
) -> TripSearchResult:
    """Assemble the envelope for the given legs, in order."""
    return TripSearchResult(
        trip_legs=len(legs),
        trip_flights=[build_leg_page(flights) for flights in legs],
    )
