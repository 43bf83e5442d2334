"""Liveness probe."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["status"])


@router.get("/", response_class=PlainTextResponse)
async def status() -> str:
    return "OK"
