"""
Domain exceptions - Semantic error types for accounts and activities.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
The API layer maps each type to an HTTP status code.
"""


class ActivityError(Exception):
    """Base class for student activity domain errors."""

    pass


class InvalidRole(ActivityError):
    """Role is neither "mahasiswa" nor "admin"."""

    pass


class InvalidCredentials(ActivityError):
    """Username not found or password mismatch."""

    pass


class InvalidToken(ActivityError):
    """Token signature, expiry or claims could not be verified."""

    pass


class PermissionDenied(ActivityError):
    """Authenticated user does not hold the required role."""

    def __init__(self, required_role: str) -> None:
        super().__init__(required_role)
        self.required_role = required_role


class ActivityNotFound(ActivityError):
    """No activity with the requested id."""

    def __init__(self, activity_id: int) -> None:
        super().__init__(activity_id)
        self.activity_id = activity_id


class AlreadyJoined(ActivityError):
    """Student is already a participant of the activity."""

    def __init__(self, activity_id: int, user_id: int) -> None:
        super().__init__(activity_id, user_id)
        self.activity_id = activity_id
        self.user_id = user_id
