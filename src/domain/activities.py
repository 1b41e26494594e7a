"""
Activity domain service - Activity management and enrollment.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from .exceptions import ActivityNotFound, AlreadyJoined
from .ports import Activity, ActivityRepository, Participant, TokenClaims

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class ActivityService:
    """
    Domain service for activities.

    Role checks happen before this service is called; it only enforces
    existence and the one-join-per-student rule.
    """

    repository: ActivityRepository
    clock: Callable[[], datetime] = field(default=_utc_now)

    def list_activities(self) -> list[Activity]:
        """Return every activity in creation order."""
        return self.repository.list_all()

    def create_activity(self, title: str, description: str, date: str) -> Activity:
        """Create an activity with an empty participant list."""
        activity = self.repository.add(title, description, date)
        logger.info("Created activity id=%s title=%s", activity.id, title)
        return activity

    def update_activity(
        self, activity_id: int, title: str, description: str, date: str
    ) -> Activity:
        """
        Overwrite title, description and date.

        Participants are preserved.

        Raises:
            ActivityNotFound: If activity_id is unknown
        """
        activity = self.repository.update(activity_id, title, description, date)
        if activity is None:
            raise ActivityNotFound(activity_id)
        logger.info("Updated activity id=%s", activity_id)
        return activity

    def join_activity(self, activity_id: int, claims: TokenClaims) -> Activity:
        """
        Enroll the authenticated student in an activity.

        Raises:
            ActivityNotFound: If activity_id is unknown
            AlreadyJoined: If the student is already a participant
        """
        activity = self.repository.get(activity_id)
        if activity is None:
            raise ActivityNotFound(activity_id)

        if activity.has_participant(claims.user_id):
            raise AlreadyJoined(activity_id, claims.user_id)

        participant = Participant(
            user_id=claims.user_id,
            username=claims.username,
            joined_at=self.clock().isoformat(),
        )
        updated = self.repository.add_participant(activity_id, participant)
        if updated is None:
            raise ActivityNotFound(activity_id)

        logger.info("User id=%s joined activity id=%s", claims.user_id, activity_id)
        return updated
