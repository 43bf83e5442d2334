"""Flight record DTOs returned by flight lookups."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FlightSegmentInfo(BaseModel):
    """Route segment a flight is scheduled on."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    origin_port: str = Field(description="IATA airport code")
    dest_port: str = Field(description="IATA airport code")
    miles: int


class FlightOption(BaseModel):
    """A single bookable flight, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    flight_segment_id: str
    scheduled_departure_time: datetime
    scheduled_arrival_time: datetime
    first_class_base_cost: float
    economy_class_base_cost: float
    num_first_class_seats: int
    num_economy_class_seats: int
    airplane_type_id: str
    flight_segment: FlightSegmentInfo | None = None
