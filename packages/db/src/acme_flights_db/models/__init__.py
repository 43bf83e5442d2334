"""SQLAlchemy ORM models for the flight store."""

from .base import Base
from .flight import Flight, FlightSegment

__all__ = ["Base", "Flight", "FlightSegment"]
