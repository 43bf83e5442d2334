"""Trip query response envelope schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from acme_flights_core.schemas import FlightOption


class TripLegPage(BaseModel):
    """One page of flight options for a single leg."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    num_pages: int
    flight_options: list[FlightOption]
    current_page: int
    has_more_options: bool
    page_size: int


class TripSearchResult(BaseModel):
    """Full trip query response: outbound page first, return page second."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    trip_legs: int
    trip_flights: list[TripLegPage]


class MilesResponse(BaseModel):
    """Reward miles for a flight segment."""

    miles: int | None = None
