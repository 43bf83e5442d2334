"""Search audit routers.

Differences between the client and server time zones can make searches
land on days without flights; these counters make that visible.
"""

from __future__ import annotations

from fastapi import APIRouter

from ..dependencies import CountersDep

router = APIRouter(tags=["audit"])


@router.get("/searches")
async def searches(counters: CountersDep) -> int:
    return counters.searches


@router.get("/successes")
async def successes(counters: CountersDep) -> int:
    return counters.successes


@router.get("/successratio")
async def success_ratio(counters: CountersDep) -> int | float:
    """Percentage of searches that returned flights, one decimal place.

    Answers a plain ``0`` until the first search is recorded.
    """
    if counters.searches == 0:
        return 0
    return float(counters.success_ratio())
