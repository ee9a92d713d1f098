"""
Top‑level package for the Youth Ministry API.

Everything lives under ``app``; import the ASGI application as
``youth_ministry_api.app.main:app``.
"""

__all__ = []
