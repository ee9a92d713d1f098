"""
Pydantic models for youth profiles.

Profile fields are edited through the youth endpoints.  The four
engagement fields (``attendance_rate``, ``engagement_score``,
``engagement_status`` and ``last_attendance``) only appear on
``YouthRead`` and are written exclusively by the engagement engine via
``EngagementUpdate``.
"""

import datetime as dt
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel

EngagementStatus = Literal["engaged", "at-risk", "disengaged"]
Gender = Literal["male", "female"]
EducationStatus = Literal["high_school", "college", "working", "unemployed"]
YouthStatus = Literal["active", "inactive"]
LeadershipLevel = Literal["none", "emerging", "developing", "established"]
DiscipleshipStatus = Literal["new_believer", "growing", "mature", "leader"]
AgeGroup = Literal["13-15", "16-18", "19-24", "25-30"]

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class YouthBase(CamelModel):
    first_name: str = Field(..., min_length=1, examples=["Sarah"])
    last_name: str = Field(..., min_length=1, examples=["Johnson"])
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["sarah.j@email.com"])
    phone: str = Field(..., min_length=1, examples=["(555) 123-4567"])
    date_of_birth: dt.date = Field(..., examples=["2002-03-15"])
    gender: Gender
    address: str = Field(..., min_length=1)
    education_status: EducationStatus
    occupation: Optional[str] = None
    join_date: dt.date = Field(..., examples=["2021-01-15"])
    status: YouthStatus = "active"
    small_group: Optional[str] = None
    mentor: Optional[str] = None
    leadership_level: LeadershipLevel = "none"
    discipleship_status: DiscipleshipStatus = "growing"
    notes: Optional[str] = None
    ministry_areas: List[str] = Field(default_factory=list)
    age_group: AgeGroup


class YouthCreate(YouthBase):
    """Schema for registering a youth."""
    pass


class YouthUpdate(CamelModel):
    """Schema for updating a youth profile.

    All fields are optional; only provided, non-null fields are applied.
    Engagement fields cannot be set here.
    """

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, min_length=1)
    date_of_birth: Optional[dt.date] = None
    gender: Optional[Gender] = None
    address: Optional[str] = Field(None, min_length=1)
    education_status: Optional[EducationStatus] = None
    occupation: Optional[str] = None
    join_date: Optional[dt.date] = None
    status: Optional[YouthStatus] = None
    small_group: Optional[str] = None
    mentor: Optional[str] = None
    leadership_level: Optional[LeadershipLevel] = None
    discipleship_status: Optional[DiscipleshipStatus] = None
    notes: Optional[str] = None
    ministry_areas: Optional[List[str]] = None
    age_group: Optional[AgeGroup] = None


class EngagementUpdate(CamelModel):
    """The derived fields produced by one engagement recalculation."""

    attendance_rate: int = Field(..., ge=0, le=100)
    engagement_score: int = Field(..., ge=0, le=100)
    engagement_status: EngagementStatus
    last_attendance: Optional[dt.date] = None


class YouthRead(YouthBase):
    """Schema for reading a youth from the API."""

    id: str
    attendance_rate: int = 0
    engagement_score: int = 0
    engagement_status: EngagementStatus = "disengaged"
    last_attendance: Optional[dt.date] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
