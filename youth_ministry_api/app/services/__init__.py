"""
Service layer.

Each service encapsulates the business logic for one domain.  Services
receive the stores they operate on explicitly; nothing reaches for
module‑level state.
"""
