"""Cache key builders for consistent namespacing."""

from __future__ import annotations


def flights_key(from_airport: str, to_airport: str, date: str) -> str:
    """Build cache key for one direction's flights on a day."""
    return f"flights:{from_airport}:{to_airport}:{date}"


def reward_miles_key(segment_id: str) -> str:
    """Build cache key for a segment's reward miles."""
    return f"miles:{segment_id}"
