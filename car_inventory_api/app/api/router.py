"""
Top‑level API router.

This router aggregates domain‑specific routers.  When a new domain is
introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import cars

router = APIRouter()

router.include_router(cars.router, prefix="/cars", tags=["cars"])
