"""
In-memory repository adapters - Implement the UserRepository and
ActivityRepository protocols.

State lives in plain lists for the lifetime of the process and is never
persisted. Lookups are linear scans. Ids come from per-repository
counters starting at 1 and are never reused.
"""

import itertools
import logging

from src.domain.ports import Activity, Participant, Role, User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """
    Implements UserRepository protocol over a Python list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._ids = itertools.count(1)

    def add(self, username: str, password_hash: str, role: Role) -> User:
        user = User(
            id=next(self._ids),
            username=username,
            password_hash=password_hash,
            role=role,
        )
        self._users.append(user)
        return user

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users if u.username == username), None)

    def list_all(self) -> list[User]:
        return list(self._users)


class InMemoryActivityRepository:
    """
    Implements ActivityRepository protocol over a Python list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Returned activities are the stored objects; the last write wins.
    """

    def __init__(self) -> None:
        self._activities: list[Activity] = []
        self._ids = itertools.count(1)

    def add(self, title: str, description: str, date: str) -> Activity:
        activity = Activity(
            id=next(self._ids),
            title=title,
            description=description,
            date=date,
        )
        self._activities.append(activity)
        return activity

    def get(self, activity_id: int) -> Activity | None:
        return next((a for a in self._activities if a.id == activity_id), None)

    def list_all(self) -> list[Activity]:
        return list(self._activities)

    def update(
        self, activity_id: int, title: str, description: str, date: str
    ) -> Activity | None:
        activity = self.get(activity_id)
        if activity is None:
            return None
        activity.title = title
        activity.description = description
        activity.date = date
        return activity

    def add_participant(self, activity_id: int, participant: Participant) -> Activity | None:
        activity = self.get(activity_id)
        if activity is None:
            return None
        activity.participants.append(participant)
        logger.debug(
            "Activity id=%s now has %d participants", activity_id, len(activity.participants)
        )
        return activity
