"""
Pydantic models for attendance records.

``AttendanceCreate`` is the payload accepted by ``POST /attendance``;
``AttendanceRecord`` is the stored, immutable event returned to clients.
The record's ``date`` is the day the activity took place, while
``recorded_at`` is when the entry was made.
"""

import datetime as dt
from typing import Literal, Optional

from pydantic import ConfigDict, Field

from .base import CamelModel

AttendanceStatus = Literal["present", "late", "absent", "excused"]
EngagementLevel = Literal["very_high", "high", "medium", "low", "none"]


class AttendanceBase(CamelModel):
    youth_id: str = Field(..., min_length=1, examples=["1"])
    program_id: str = Field(..., min_length=1, examples=["2"])
    date: dt.date = Field(..., examples=["2026-01-26"])
    attendance_status: AttendanceStatus = Field(..., examples=["present"])
    engagement_level: EngagementLevel = Field(..., examples=["high"])
    # Informational only; not used when scoring engagement.
    participated_in_activity: bool = Field(..., examples=[True])
    activity_notes: Optional[str] = None
    follow_up_notes: Optional[str] = None


class AttendanceCreate(AttendanceBase):
    """Schema for submitting an attendance record."""
    pass


class AttendanceRecord(AttendanceBase):
    """An attendance event as stored and returned by the API.

    Records are frozen: once appended to the store they are never
    modified.
    """

    id: str
    youth_name: str
    program_name: str
    recorded_at: dt.datetime
    recorded_by: Optional[str] = None

    model_config = ConfigDict(frozen=True)
