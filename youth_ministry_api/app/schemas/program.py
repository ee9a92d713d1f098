"""Pydantic models for ministry programs."""

import datetime as dt
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel

ProgramCategory = Literal["worship", "discipleship", "outreach", "fellowship", "leadership", "sabbath_school"]
ScheduleType = Literal["sabbath", "weekday", "special"]


class ProgramRead(CamelModel):
    id: str
    name: str = Field(..., examples=["Youth Bible Study"])
    description: str
    category: ProgramCategory
    start_date: dt.date
    end_date: Optional[dt.date] = None
    is_active: bool = True
    participant_count: int = Field(0, ge=0)
    max_capacity: Optional[int] = Field(None, ge=0)
    leader: str
    schedule: str = Field(..., examples=["Wednesdays at 7:00 PM"])
    schedule_type: ScheduleType = "weekday"
    average_attendance: int = Field(0, ge=0)
    engagement_score: int = Field(0, ge=0, le=100)
