"""Trip search request schema."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class FlightSearchRequest(BaseModel):
    """Origin/destination/date query for a one-way or round trip.

    Field aliases follow the form keys posted by the booking front end
    (``fromAirport``, ``toAirport``, ``fromDate``, ``returnDate``, ``oneWay``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    from_airport: str = Field(min_length=1, description="Airport code")
    to_airport: str = Field(min_length=1, description="Airport code")
    depart_date: date = Field(alias="fromDate")
    return_date: date | None = None
    one_way: bool = False

    @field_validator("return_date", mode="before")
    @classmethod
    def _blank_return_date(cls, value: Any) -> Any:
        # one-way forms still post an empty returnDate
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _validate_dates(self) -> FlightSearchRequest:
        if not self.one_way and self.return_date is None:
            msg = "returnDate is required for a round trip"
            raise ValueError(msg)
        return self
