"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one domain (auth, youths,
programs, attendance, dashboard).  They are aggregated in ``router.py``.
"""
