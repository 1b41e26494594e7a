"""
Unit tests for domain ports, records and exceptions.

Tests verify:
- Role enum values and parsing
- Records behave as plain dataclasses
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import subprocess
from enum import Enum
from pathlib import Path

import pytest

from src.domain.exceptions import (
    ActivityError,
    ActivityNotFound,
    AlreadyJoined,
    InvalidCredentials,
    InvalidRole,
    InvalidToken,
    PermissionDenied,
)
from src.domain.ports import Activity, Participant, Role, TokenClaims

DOMAIN_DIR = Path(__file__).resolve().parents[2] / "src" / "domain"


class TestRoleEnum:
    """Tests for Role enum."""

    def test_role_is_str_enum(self) -> None:
        """Role is an Enum whose members compare equal to their strings."""
        assert issubclass(Role, Enum)
        assert Role.ADMIN == "admin"
        assert Role.STUDENT == "mahasiswa"

    def test_role_has_exactly_two_members(self) -> None:
        assert {r.value for r in Role} == {"admin", "mahasiswa"}

    @pytest.mark.parametrize("value", ["admin", "mahasiswa"])
    def test_parse_known_role(self, value: str) -> None:
        assert Role.parse(value).value == value

    @pytest.mark.parametrize("value", ["", "Admin", "student", "dosen"])
    def test_parse_unknown_role_raises(self, value: str) -> None:
        with pytest.raises(InvalidRole):
            Role.parse(value)


class TestRecords:
    """Tests for domain records."""

    def test_activity_starts_without_participants(self) -> None:
        activity = Activity(id=1, title="Seminar", description="AI", date="2025-01-01")
        assert activity.participants == []

    def test_activity_participant_lists_are_independent(self) -> None:
        a = Activity(id=1, title="A", description="a", date="d")
        b = Activity(id=2, title="B", description="b", date="d")
        a.participants.append(Participant(user_id=1, username="budi", joined_at="t"))
        assert b.participants == []

    def test_has_participant(self) -> None:
        activity = Activity(id=1, title="A", description="a", date="d")
        activity.participants.append(Participant(user_id=7, username="sari", joined_at="t"))
        assert activity.has_participant(7)
        assert not activity.has_participant(8)

    def test_token_claims_are_immutable(self) -> None:
        claims = TokenClaims(user_id=1, username="budi", role=Role.STUDENT)
        with pytest.raises(AttributeError):
            claims.role = Role.ADMIN  # type: ignore[misc]


class TestExceptions:
    """Tests for domain exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            InvalidRole,
            InvalidCredentials,
            InvalidToken,
            PermissionDenied,
            ActivityNotFound,
            AlreadyJoined,
        ],
    )
    def test_all_inherit_from_activity_error(self, exc_type: type) -> None:
        assert issubclass(exc_type, ActivityError)

    def test_permission_denied_keeps_required_role(self) -> None:
        assert PermissionDenied("admin").required_role == "admin"

    def test_activity_not_found_keeps_id(self) -> None:
        assert ActivityNotFound(42).activity_id == 42

    def test_already_joined_keeps_ids(self) -> None:
        exc = AlreadyJoined(3, 9)
        assert exc.activity_id == 3
        assert exc.user_id == 9


class TestDomainPurity:
    """Domain layer must not import web, validation or token libraries."""

    @pytest.mark.parametrize(
        "pattern",
        ["from fastapi", "import fastapi", "from pydantic", "import jwt", "from jwt"],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        result = subprocess.run(
            ["grep", "-r", pattern, str(DOMAIN_DIR)],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{pattern!r} found: {result.stdout}"
