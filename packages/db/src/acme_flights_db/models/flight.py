"""Flight segment and scheduled flight models."""

from __future__ import annotations

import uuid  # noqa: TC003
from datetime import datetime  # noqa: TC003

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class FlightSegment(TimestampMixin, Base):
    """Flight segments table - one directional route with its mileage."""

    __tablename__ = "flight_segments"

    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    origin_port: Mapped[str] = mapped_column(String(3), nullable=False)
    dest_port: Mapped[str] = mapped_column(String(3), nullable=False)
    miles: Mapped[int] = mapped_column(Integer, nullable=False)

    flights: Mapped[list[Flight]] = relationship(back_populates="segment")

    __table_args__ = (
        Index("ix_flight_segments_route", "origin_port", "dest_port"),
    )

    def __repr__(self) -> str:
        return f"<FlightSegment {self.id} {self.origin_port}->{self.dest_port}>"


class Flight(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Flights table - one scheduled departure of a segment."""

    __tablename__ = "flights"

    flight_segment_id: Mapped[str] = mapped_column(
        String(20), ForeignKey("flight_segments.id"), nullable=False
    )
    scheduled_departure_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    scheduled_arrival_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    first_class_base_cost: Mapped[float] = mapped_column(Float, nullable=False)
    economy_class_base_cost: Mapped[float] = mapped_column(Float, nullable=False)
    num_first_class_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    num_economy_class_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    airplane_type_id: Mapped[str] = mapped_column(String(20), nullable=False)

    # Relationships
    segment: Mapped[FlightSegment] = relationship(back_populates="flights")

    __table_args__ = (
        Index("ix_flights_flight_segment_id", "flight_segment_id"),
        Index("ix_flights_scheduled_departure_time", "scheduled_departure_time"),
    )

    def __repr__(self) -> str:
        return f"<Flight {self.flight_segment_id} @ {self.scheduled_departure_time}>"
