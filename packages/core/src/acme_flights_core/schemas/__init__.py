"""Core schemas for the flight service."""

from .flight import FlightOption, FlightSegmentInfo
from .search import FlightSearchRequest

__all__ = [
    "FlightOption",
    "FlightSearchRequest",
    "FlightSegmentInfo",
]
