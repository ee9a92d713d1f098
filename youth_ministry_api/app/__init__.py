"""
Application package initializer.

The service is split into ``core`` (configuration, logging, security
and the in‑memory stores), ``schemas`` (pydantic payloads), ``services``
(business logic) and ``api`` (versioned routers).  Each domain (youths,
programs, attendance, dashboard) has its own router under
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
