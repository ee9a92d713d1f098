"""
Business logic for dashboard users.

Accounts live in the in‑memory ``UserStore``; passwords are only ever
stored as PBKDF2 hashes.
"""

import logging
from typing import Optional

from ..core.security import verify_password
from ..core.store import DataStore
from ..schemas.user import UserRead


class UserService:
    """Service for authenticating dashboard users."""

    @classmethod
    async def authenticate(cls, store: DataStore, email: str, password: str) -> Optional[UserRead]:
        """Return the user if ``email``/``password`` match, otherwise ``None``."""
        logger = logging.getLogger(__name__)
        user = store.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", email)
            return None
        logger.info("User %s logged in", user.email)
        return UserRead(id=user.id, email=user.email, name=user.name, role=user.role)
