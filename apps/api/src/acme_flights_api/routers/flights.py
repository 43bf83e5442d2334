"""Trip query and reward miles routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Form

from acme_flights_core.schemas import FlightSearchRequest

from ..dependencies import LookupDep, get_trip_query_service
from ..schemas.trips import MilesResponse, TripSearchResult
from ..services.trip_query_service import TripQueryService

router = APIRouter(tags=["flights"])

TripQueryDep = Annotated[TripQueryService, Depends(get_trip_query_service)]


@router.post("/queryflights", response_model=TripSearchResult)
async def query_flights(
    query: Annotated[FlightSearchRequest, Form()],
    service: TripQueryDep,
) -> TripSearchResult:
    """Find outbound (and return) flights for a trip."""
    return await service.query_trip_flights(query)


@router.post("/getrewardmiles", response_model=MilesResponse)
async def get_reward_miles(
    flight_segment: Annotated[str, Form(alias="flightSegment", min_length=1)],
    lookup: LookupDep,
) -> MilesResponse:
    """Return the reward miles earned on a flight segment."""
    miles = await lookup.get_reward_miles(flight_segment)
    return MilesResponse(miles=miles)
