"""
Business logic for attendance records.

Recording attendance is the only write path that triggers engagement
scoring: the submission is checked against the youth and program
stores, appended, and the youth's engagement fields are recalculated
from the full history, all while holding that youth's write lock.
"""

import datetime as dt
import logging
import uuid
from typing import Any, Dict, List, Optional

from ..core.errors import ReferenceNotFound
from ..core.store import DataStore
from ..schemas.attendance import AttendanceCreate, AttendanceRecord
from .engagement_service import EngagementService


class AttendanceService:
    """Service for recording and listing attendance."""

    @classmethod
    async def record_attendance(
        cls,
        store: DataStore,
        data: AttendanceCreate,
        current_user: Dict[str, Any],
    ) -> AttendanceRecord:
        """Store a new attendance record and refresh the youth's engagement.

        Raises ``ReferenceNotFound`` if the youth or the program does not
        exist; in that case no store is modified.
        """
        logger = logging.getLogger(__name__)
        # Unknown youths are rejected before a write lock is taken for them.
        if store.youths.get(data.youth_id) is None:
            raise ReferenceNotFound(youth_id=data.youth_id, program_id=data.program_id)
        with store.writer(data.youth_id):
            youth = store.youths.get(data.youth_id)
            program = store.programs.get(data.program_id)
            if youth is None or program is None:
                raise ReferenceNotFound(youth_id=data.youth_id, program_id=data.program_id)

            record = AttendanceRecord(
                id=str(uuid.uuid4()),
                youth_name=youth.full_name,
                program_name=program.name,
                recorded_at=dt.datetime.now(dt.timezone.utc),
                recorded_by=current_user.get("name"),
                **data.model_dump(),
            )
            store.attendance.append(record)
            EngagementService.recalculate(store.youths, store.attendance, data.youth_id)

        logger.info(
            "%s recorded %s for youth %s in program %s on %s",
            current_user.get("sub"),
            record.attendance_status,
            record.youth_id,
            record.program_id,
            record.date.isoformat(),
        )
        return record

    @classmethod
    async def list_attendance(
        cls,
        store: DataStore,
        youth_id: Optional[str] = None,
        program_id: Optional[str] = None,
    ) -> List[AttendanceRecord]:
        """Return attendance records, newest entry first, optionally filtered."""
        return store.attendance.list(youth_id=youth_id, program_id=program_id)
