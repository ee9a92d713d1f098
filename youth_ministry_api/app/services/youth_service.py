"""
Business logic for youth profiles.

Profile edits never touch the engagement fields; those are owned by
``EngagementService``.  Missing youths are reported with ``ValueError``
which the routes translate into HTTP 404.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from ..core.store import DataStore
from ..schemas.youth import YouthCreate, YouthRead


class YouthService:
    """Service for managing youth profiles."""

    @classmethod
    async def list_youths(
        cls,
        store: DataStore,
        search: Optional[str] = None,
        status: Optional[str] = None,
        age_group: Optional[str] = None,
        engagement_status: Optional[str] = None,
    ) -> List[YouthRead]:
        """Return youths matching all supplied filters.

        ``search`` is a case‑insensitive substring match on the full name
        or the e‑mail address.
        """
        needle = (search or "").strip().lower()
        results: List[YouthRead] = []
        for youth in store.youths.list():
            if needle and needle not in youth.full_name.lower() and needle not in youth.email.lower():
                continue
            if status and youth.status != status:
                continue
            if age_group and youth.age_group != age_group:
                continue
            if engagement_status and youth.engagement_status != engagement_status:
                continue
            results.append(youth)
        return results

    @classmethod
    async def get_youth(cls, store: DataStore, youth_id: str) -> YouthRead:
        youth = store.youths.get(youth_id)
        if youth is None:
            raise ValueError(f"Youth {youth_id} not found")
        return youth

    @classmethod
    async def create_youth(cls, store: DataStore, data: YouthCreate, current_user: Dict[str, Any]) -> YouthRead:
        """Register a youth with default (empty) engagement figures."""
        youth = YouthRead(id=str(uuid.uuid4()), **data.model_dump())
        store.youths.add(youth)
        logging.getLogger(__name__).info(
            "User %s created youth %s (%s)", current_user.get("sub"), youth.id, youth.full_name
        )
        return youth

    @classmethod
    async def update_youth(cls, store: DataStore, youth_id: str, updates: Dict[str, Any]) -> YouthRead:
        """Apply a partial profile update.  Raises ``ValueError`` if missing."""
        youth = store.youths.update(youth_id, updates)
        logging.getLogger(__name__).info("Youth %s updated: %s", youth_id, ", ".join(sorted(updates)) or "no changes")
        return youth

    @classmethod
    async def delete_youth(cls, store: DataStore, youth_id: str) -> None:
        """Remove a youth profile.

        Attendance records referencing the youth are kept; the record
        store is append‑only.
        """
        store.youths.delete(youth_id)
        logging.getLogger(__name__).info("Youth %s deleted", youth_id)
