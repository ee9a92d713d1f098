"""
Attendance endpoints for API v1.

Any signed‑in role may record attendance.  Each new record immediately
refreshes the youth's engagement score and status.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from youth_ministry_api.app.core.errors import ReferenceNotFound
from youth_ministry_api.app.core.security import get_current_user, require_roles
from youth_ministry_api.app.core.store import DataStore, get_store
from youth_ministry_api.app.schemas.attendance import AttendanceCreate, AttendanceRecord
from youth_ministry_api.app.services.attendance_service import AttendanceService

router = APIRouter()


@router.get("/", response_model=List[AttendanceRecord])
async def list_attendance(
    youth_id: Optional[str] = Query(None, alias="youthId"),
    program_id: Optional[str] = Query(None, alias="programId"),
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> List[AttendanceRecord]:
    """List attendance records, most recently entered first."""
    return await AttendanceService.list_attendance(store, youth_id=youth_id, program_id=program_id)


@router.post("/", response_model=AttendanceRecord, status_code=status.HTTP_201_CREATED)
async def record_attendance(
    attendance: AttendanceCreate,
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(require_roles("admin", "leader", "volunteer")),
) -> AttendanceRecord:
    """Record attendance for a youth at a program.

    Returns HTTP 404 if the youth or program does not exist; nothing is
    stored in that case.
    """
    try:
        return await AttendanceService.record_attendance(store, attendance, current_user)
    except ReferenceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
