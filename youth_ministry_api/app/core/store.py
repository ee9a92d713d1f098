"""
In‑memory datastore.

Each collection (users, youths, programs, attendance records) is an
explicitly owned store object.  A ``DataStore`` bundles them together
with per‑youth write locks; the application keeps one instance on
``app.state.store`` and routes receive it through the ``get_store``
dependency.  Nothing here is durable: restarting the process starts
from an empty (or freshly seeded) store.
"""

import threading
import weakref
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from fastapi import Request

from ..schemas.attendance import AttendanceRecord
from ..schemas.program import ProgramRead
from ..schemas.user import UserRecord
from ..schemas.youth import EngagementUpdate, YouthRead


class AttendanceStore:
    """Append‑only, insertion‑ordered collection of attendance records.

    There is intentionally no update or delete.  A record appended is
    visible to the next ``find_by_youth`` call immediately.
    """

    def __init__(self) -> None:
        self._records: List[AttendanceRecord] = []

    def append(self, record: AttendanceRecord) -> None:
        self._records.append(record)

    def find_by_youth(self, youth_id: str) -> List[AttendanceRecord]:
        """Return every record for ``youth_id`` in insertion order."""
        return [record for record in self._records if record.youth_id == youth_id]

    def list(self, youth_id: Optional[str] = None, program_id: Optional[str] = None) -> List[AttendanceRecord]:
        """Return records matching the optional filters, newest entry first."""
        return [
            record
            for record in reversed(self._records)
            if (not youth_id or record.youth_id == youth_id)
            and (not program_id or record.program_id == program_id)
        ]

    def __len__(self) -> int:
        return len(self._records)


class YouthStore:
    """Mapping of youth id to profile.

    Profiles are replaced wholesale on every change, so readers only ever
    observe complete before/after states.
    """

    def __init__(self) -> None:
        self._youths: Dict[str, YouthRead] = {}
        # Display order: most recently added first.
        self._order: List[str] = []

    def get(self, youth_id: str) -> Optional[YouthRead]:
        return self._youths.get(youth_id)

    def list(self) -> List[YouthRead]:
        return [self._youths[youth_id] for youth_id in self._order]

    def add(self, youth: YouthRead) -> None:
        if youth.id in self._youths:
            raise ValueError(f"Youth {youth.id} already exists")
        self._youths[youth.id] = youth
        self._order.insert(0, youth.id)

    def update(self, youth_id: str, changes: dict) -> YouthRead:
        """Apply profile ``changes`` (keyed by field name) to a youth.

        Raises ``ValueError`` if the youth does not exist.
        """
        youth = self._youths.get(youth_id)
        if youth is None:
            raise ValueError(f"Youth {youth_id} not found")
        updated = youth.model_copy(update=changes)
        self._youths[youth_id] = updated
        return updated

    def delete(self, youth_id: str) -> None:
        if youth_id not in self._youths:
            raise ValueError(f"Youth {youth_id} not found")
        del self._youths[youth_id]
        self._order.remove(youth_id)

    def apply_engagement_update(self, youth_id: str, update: EngagementUpdate) -> None:
        """Write the derived engagement fields for a youth.

        Unknown ids are silently ignored.
        """
        youth = self._youths.get(youth_id)
        if youth is None:
            return
        self._youths[youth_id] = youth.model_copy(update=dict(update))

    def __len__(self) -> int:
        return len(self._youths)


class ProgramStore:
    def __init__(self) -> None:
        self._programs: Dict[str, ProgramRead] = {}

    def get(self, program_id: str) -> Optional[ProgramRead]:
        return self._programs.get(program_id)

    def list(self) -> List[ProgramRead]:
        return list(self._programs.values())

    def add(self, program: ProgramRead) -> None:
        if program.id in self._programs:
            raise ValueError(f"Program {program.id} already exists")
        self._programs[program.id] = program

    def __len__(self) -> int:
        return len(self._programs)


class UserStore:
    def __init__(self) -> None:
        self._users: Dict[str, UserRecord] = {}

    def get(self, user_id: str) -> Optional[UserRecord]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        email = email.lower()
        for user in self._users.values():
            if user.email.lower() == email:
                return user
        return None

    def add(self, user: UserRecord) -> None:
        if self.get_by_email(user.email) is not None:
            raise ValueError(f"User {user.email} already exists")
        self._users[user.id] = user


class DataStore:
    """All stores of one running application plus their write locks."""

    def __init__(self) -> None:
        self.users = UserStore()
        self.youths = YouthStore()
        self.programs = ProgramStore()
        self.attendance = AttendanceStore()
        # Locks live only while some writer holds them, so ids that never
        # resolve to a youth do not accumulate here.
        self._locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    def _youth_lock(self, youth_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(youth_id)
            if lock is None:
                lock = self._locks[youth_id] = threading.Lock()
            return lock

    @contextmanager
    def writer(self, youth_id: str) -> Iterator["DataStore"]:
        """Hold the write lock for one youth.

        Appending an attendance record and recalculating engagement from
        the full history must happen inside a single ``writer`` block so
        two submissions for the same youth cannot interleave.
        """
        lock = self._youth_lock(youth_id)
        with lock:
            yield self


def build_store(seed: bool = False) -> DataStore:
    """Create a new store, optionally loaded with the demo data."""
    store = DataStore()
    if seed:
        from .seed import seed_store

        seed_store(store)
    return store


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
