"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under one prefix.  When a new domain is
added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import attendance, auth, dashboard, programs, youths

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(youths.router, prefix="/youths", tags=["youths"])
router.include_router(programs.router, prefix="/programs", tags=["programs"])
router.include_router(attendance.router, prefix="/attendance", tags=["attendance"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
