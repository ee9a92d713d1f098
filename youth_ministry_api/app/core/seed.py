"""
Demo data loaded into a fresh store when ``SEED_DEMO_DATA`` is on.

The accounts below are for local use only; disable seeding in any
shared deployment.
"""

import logging

from ..schemas.program import ProgramRead
from ..schemas.user import UserRecord
from ..schemas.youth import YouthRead
from .security import hash_password

DEMO_USERS = [
    {"id": "u1", "email": "admin@youthblossom.org", "name": "Admin User", "password": "admin123", "role": "admin"},
    {"id": "u2", "email": "leader@youthblossom.org", "name": "Leader User", "password": "leader123", "role": "leader"},
    {"id": "u3", "email": "volunteer@youthblossom.org", "name": "Volunteer User", "password": "vol123", "role": "volunteer"},
]

DEMO_YOUTHS = [
    {
        "id": "1",
        "first_name": "Sarah",
        "last_name": "Johnson",
        "email": "sarah.j@email.com",
        "phone": "(555) 123-4567",
        "date_of_birth": "2002-03-15",
        "gender": "female",
        "address": "123 Oak Street, Springfield",
        "education_status": "college",
        "occupation": "Student",
        "join_date": "2021-01-15",
        "status": "active",
        "engagement_score": 92,
        "engagement_status": "engaged",
        "small_group": "Young Adults Connect",
        "mentor": "Pastor Michael",
        "leadership_level": "developing",
        "discipleship_status": "mature",
        "attendance_rate": 95,
        "last_attendance": "2026-01-26",
        "ministry_areas": ["Worship", "Youth Outreach"],
        "age_group": "19-24",
    },
    {
        "id": "2",
        "first_name": "Marcus",
        "last_name": "Williams",
        "email": "marcus.w@email.com",
        "phone": "(555) 234-5678",
        "date_of_birth": "2005-07-22",
        "gender": "male",
        "address": "456 Maple Avenue, Springfield",
        "education_status": "high_school",
        "join_date": "2022-06-10",
        "status": "active",
        "engagement_score": 78,
        "engagement_status": "engaged",
        "small_group": "Teen Warriors",
        "leadership_level": "emerging",
        "discipleship_status": "growing",
        "attendance_rate": 82,
        "last_attendance": "2026-01-26",
        "ministry_areas": ["Media", "Welcome Team"],
        "age_group": "16-18",
    },
    {
        "id": "3",
        "first_name": "Emily",
        "last_name": "Chen",
        "email": "emily.c@email.com",
        "phone": "(555) 345-6789",
        "date_of_birth": "2000-11-08",
        "gender": "female",
        "address": "789 Pine Road, Springfield",
        "education_status": "working",
        "occupation": "Graphic Designer",
        "join_date": "2019-09-01",
        "status": "active",
        "engagement_score": 88,
        "engagement_status": "engaged",
        "small_group": "Young Professionals",
        "mentor": "Deacon James",
        "leadership_level": "established",
        "discipleship_status": "leader",
        "attendance_rate": 90,
        "last_attendance": "2026-01-19",
        "ministry_areas": ["Creative Arts", "Discipleship"],
        "age_group": "25-30",
    },
    {
        "id": "4",
        "first_name": "David",
        "last_name": "Martinez",
        "email": "david.m@email.com",
        "phone": "(555) 456-7890",
        "date_of_birth": "2007-04-30",
        "gender": "male",
        "address": "321 Elm Street, Springfield",
        "education_status": "high_school",
        "join_date": "2023-02-14",
        "status": "active",
        "engagement_score": 45,
        "engagement_status": "at-risk",
        "small_group": "Teen Warriors",
        "leadership_level": "none",
        "discipleship_status": "new_believer",
        "attendance_rate": 55,
        "last_attendance": "2026-01-05",
        "notes": "Missing several services, needs follow-up",
        "age_group": "16-18",
    },
]

DEMO_PROGRAMS = [
    {
        "id": "1",
        "name": "Sunday Youth Service",
        "description": "Weekly worship gathering for all youth ages 13-30",
        "category": "worship",
        "start_date": "2020-01-01",
        "participant_count": 45,
        "max_capacity": 60,
        "leader": "Pastor Michael",
        "schedule": "Sundays at 10:00 AM",
        "schedule_type": "weekday",
        "average_attendance": 38,
        "engagement_score": 85,
    },
    {
        "id": "2",
        "name": "Youth Bible Study",
        "description": "Mid-week deep dive into Scripture",
        "category": "discipleship",
        "start_date": "2020-03-15",
        "participant_count": 28,
        "max_capacity": 35,
        "leader": "Deacon James",
        "schedule": "Wednesdays at 7:00 PM",
        "schedule_type": "weekday",
        "average_attendance": 22,
        "engagement_score": 78,
    },
    {
        "id": "3",
        "name": "Community Outreach",
        "description": "Monthly service projects in the local community",
        "category": "outreach",
        "start_date": "2021-06-01",
        "participant_count": 20,
        "leader": "Sister Grace",
        "schedule": "First Saturday of each month",
        "schedule_type": "sabbath",
        "average_attendance": 15,
        "engagement_score": 72,
    },
    {
        "id": "4",
        "name": "Summer Camp 2025",
        "description": "Annual youth retreat with worship, teaching, and activities",
        "category": "fellowship",
        "start_date": "2025-07-15",
        "end_date": "2025-07-20",
        "is_active": False,
        "participant_count": 40,
        "max_capacity": 50,
        "leader": "Youth Ministry Team",
        "schedule": "July 15-20, 2025",
        "schedule_type": "special",
        "average_attendance": 40,
        "engagement_score": 92,
    },
]


def seed_store(store) -> None:
    """Load the demo users, youths and programs into ``store``."""
    logger = logging.getLogger(__name__)
    for user in DEMO_USERS:
        fields = {key: value for key, value in user.items() if key != "password"}
        store.users.add(UserRecord(password_hash=hash_password(user["password"]), **fields))
    # Added oldest first so the listing shows them in their original order.
    for youth in reversed(DEMO_YOUTHS):
        store.youths.add(YouthRead(**youth))
    for program in DEMO_PROGRAMS:
        store.programs.add(ProgramRead(**program))
    logger.info(
        "Seeded %d users, %d youths and %d programs",
        len(DEMO_USERS),
        len(DEMO_YOUTHS),
        len(DEMO_PROGRAMS),
    )
