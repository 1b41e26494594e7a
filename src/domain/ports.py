"""
Port interfaces - Records and Protocol definitions for infrastructure abstraction.

This module defines the records the domain works with and the interfaces
(ports) that the domain requires from infrastructure. Adapters implement
these protocols.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from .exceptions import InvalidRole


class Role(str, Enum):
    """
    Access roles.

    - ADMIN: creates and updates activities
    - STUDENT: joins activities
    """

    ADMIN = "admin"
    STUDENT = "mahasiswa"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """
        Convert a raw role string into a Role.

        Raises:
            InvalidRole: If value is not one of the declared roles
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidRole(value) from None


@dataclass
class User:
    """Registered account. Never updated or deleted."""

    id: int
    username: str
    password_hash: str
    role: Role


@dataclass
class Participant:
    """Student enrolled in an activity."""

    user_id: int
    username: str
    joined_at: str  # ISO-8601, UTC


@dataclass
class Activity:
    """Student activity with its ordered participant list."""

    id: int
    title: str
    description: str
    date: str  # Opaque, stored as given
    participants: list[Participant] = field(default_factory=list)

    def has_participant(self, user_id: int) -> bool:
        return any(p.user_id == user_id for p in self.participants)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried inside a signed access token."""

    user_id: int
    username: str
    role: Role


class UserRepository(Protocol):
    """Port interface for user storage."""

    def add(self, username: str, password_hash: str, role: Role) -> User:
        """
        Store a new user with the next available id.

        Usernames are not checked for uniqueness.
        """
        ...

    def find_by_username(self, username: str) -> User | None:
        """Return the first user registered under username, or None."""
        ...

    def list_all(self) -> list[User]:
        """Return all users in registration order."""
        ...


class ActivityRepository(Protocol):
    """Port interface for activity storage."""

    def add(self, title: str, description: str, date: str) -> Activity:
        """Store a new activity with no participants and the next available id."""
        ...

    def get(self, activity_id: int) -> Activity | None:
        """Return the activity with activity_id, or None."""
        ...

    def list_all(self) -> list[Activity]:
        """Return all activities in creation order."""
        ...

    def update(
        self, activity_id: int, title: str, description: str, date: str
    ) -> Activity | None:
        """
        Overwrite title, description and date of an activity.

        The id and participant list are preserved.

        Returns:
            The updated activity, or None if activity_id is unknown
        """
        ...

    def add_participant(self, activity_id: int, participant: Participant) -> Activity | None:
        """
        Append a participant to an activity.

        Returns:
            The updated activity, or None if activity_id is unknown
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for signing and verifying access tokens."""

    def issue(self, claims: TokenClaims) -> str:
        """Return a signed, expiring token carrying claims."""
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry, then decode claims.

        Raises:
            InvalidToken: If the token cannot be trusted
        """
        ...
