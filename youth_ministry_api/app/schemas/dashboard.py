"""Pydantic model for the dashboard metrics endpoint."""

from .base import CamelModel


class DashboardMetrics(CamelModel):
    active_youths: int
    # Youths whose status is at-risk or disengaged.
    at_risk_youths: int
    total_programs: int
    attendance_records: int
    avg_engagement: int
    avg_attendance: int
