"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for the student activity
API: account registration and login, activity management and enrollment.
It defines its own port interfaces for infrastructure abstraction.
"""

from .accounts import AccountService
from .activities import ActivityService
from .exceptions import (
    ActivityError,
    ActivityNotFound,
    AlreadyJoined,
    InvalidCredentials,
    InvalidRole,
    InvalidToken,
    PermissionDenied,
)
from .ports import (
    Activity,
    ActivityRepository,
    Participant,
    Role,
    TokenClaims,
    TokenIssuer,
    User,
    UserRepository,
)

__all__ = [
    "AccountService",
    "Activity",
    "ActivityError",
    "ActivityNotFound",
    "ActivityRepository",
    "ActivityService",
    "AlreadyJoined",
    "InvalidCredentials",
    "InvalidRole",
    "InvalidToken",
    "Participant",
    "PermissionDenied",
    "Role",
    "TokenClaims",
    "TokenIssuer",
    "User",
    "UserRepository",
]
