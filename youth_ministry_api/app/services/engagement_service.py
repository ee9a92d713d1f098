"""
Engagement scoring for youth profiles.

A youth's ``attendance_rate``, ``engagement_score``,
``engagement_status`` and ``last_attendance`` are derived from their
complete attendance history every time a record is added; nothing is
accumulated incrementally.

Scoring works as follows:

* every record's attendance status is weighted
  (present 1.0, late 0.75, excused 0.5, absent 0.0) and the weights are
  averaged into the *attendance score*;
* every record's engagement level is weighted
  (very_high 1.0, high 0.85, medium 0.65, low 0.35, none 0.0) and
  averaged into the *activity score*;
* ``attendance_rate`` is the attendance score as a percentage and
  ``engagement_score`` is ``60% attendance + 40% activity``, both rounded
  half‑up to whole numbers;
* scores of 70 and above are *engaged*, 40 to 69 *at-risk* and below 40
  *disengaged*.
"""

import logging
import math
from typing import Optional, Sequence

from ..core.store import AttendanceStore, YouthStore
from ..schemas.attendance import AttendanceRecord
from ..schemas.youth import EngagementUpdate

ATTENDANCE_STATUS_WEIGHTS = {
    "present": 1.0,
    "late": 0.75,
    "excused": 0.5,
    "absent": 0.0,
}

ENGAGEMENT_LEVEL_WEIGHTS = {
    "very_high": 1.0,
    "high": 0.85,
    "medium": 0.65,
    "low": 0.35,
    "none": 0.0,
}

ATTENDANCE_SHARE = 0.6
ACTIVITY_SHARE = 0.4

ENGAGED_THRESHOLD = 70
AT_RISK_THRESHOLD = 40


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``12.5 -> 13``).

    The value is first snapped to nine decimals so binary noise such as
    ``74.49999999999999`` still counts as a half.
    """
    return int(math.floor(round(value, 9) + 0.5))


def classify_engagement(score: int) -> str:
    """Map an engagement score to its status band."""
    if score >= ENGAGED_THRESHOLD:
        return "engaged"
    if score >= AT_RISK_THRESHOLD:
        return "at-risk"
    return "disengaged"


def latest_attendance(history: Sequence[AttendanceRecord]) -> Optional[AttendanceRecord]:
    """Return the record with the most recent activity date.

    Records sharing a date are ordered by ``recorded_at``; if that ties
    too, the record appended last wins.
    """
    latest = None
    for record in history:
        if latest is None or (record.date, record.recorded_at) >= (latest.date, latest.recorded_at):
            latest = record
    return latest


def compute_engagement(history: Sequence[AttendanceRecord]) -> Optional[EngagementUpdate]:
    """Derive the engagement fields from a youth's full history.

    Returns ``None`` for an empty history.
    """
    if not history:
        return None

    count = len(history)
    attendance_score = sum(ATTENDANCE_STATUS_WEIGHTS[r.attendance_status] for r in history) / count
    activity_score = sum(ENGAGEMENT_LEVEL_WEIGHTS[r.engagement_level] for r in history) / count

    engagement_score = round_half_up((attendance_score * ATTENDANCE_SHARE + activity_score * ACTIVITY_SHARE) * 100)
    return EngagementUpdate(
        attendance_rate=round_half_up(attendance_score * 100),
        engagement_score=engagement_score,
        engagement_status=classify_engagement(engagement_score),
        last_attendance=latest_attendance(history).date,
    )


class EngagementService:
    """Recalculates and stores a youth's engagement fields."""

    @classmethod
    def recalculate(cls, youths: YouthStore, attendance: AttendanceStore, youth_id: str) -> None:
        """Recompute the engagement fields of ``youth_id`` from its history.

        Does nothing when the youth does not exist or has no attendance
        yet; in the latter case the profile keeps its current values.
        Never raises for well‑formed records.
        """
        if youths.get(youth_id) is None:
            return
        update = compute_engagement(attendance.find_by_youth(youth_id))
        if update is None:
            return
        youths.apply_engagement_update(youth_id, update)
        logging.getLogger(__name__).debug(
            "Youth %s engagement: score=%d status=%s attendance=%d%%",
            youth_id,
            update.engagement_score,
            update.engagement_status,
            update.attendance_rate,
        )
