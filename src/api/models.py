"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from src.domain.ports import Activity, User

# bcrypt only hashes the first 72 bytes and rejects longer input.
BCRYPT_MAX_PASSWORD_BYTES = 72


def _fits_bcrypt(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password cannot be longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return value


Password = Annotated[str, Field(min_length=1), AfterValidator(_fits_bcrypt)]


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    username: str = Field(..., min_length=1)
    password: Password
    role: str = Field(..., description='Either "mahasiswa" or "admin"')


class UserSummary(BaseModel):
    """Public view of a user (no password hash)."""

    id: int
    username: str
    role: str

    @classmethod
    def from_domain(cls, user: User) -> "UserSummary":
        return cls(id=user.id, username=user.username, role=user.role.value)


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str
    user: UserSummary


class LoginRequest(BaseModel):
    """Request model for login."""

    username: str = Field(..., min_length=1)
    password: Password


class LoginResponse(BaseModel):
    """Response model for successful login."""

    message: str
    token: str


class ActivityRequest(BaseModel):
    """Request model for creating or updating an activity."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1, description="Activity date, stored as given")


class ParticipantOut(BaseModel):
    """Participant entry within an activity."""

    user_id: int
    username: str
    joined_at: str


class ActivityOut(BaseModel):
    """Activity with its participants."""

    id: int
    title: str
    description: str
    date: str
    participants: list[ParticipantOut]

    @classmethod
    def from_domain(cls, activity: Activity) -> "ActivityOut":
        return cls(
            id=activity.id,
            title=activity.title,
            description=activity.description,
            date=activity.date,
            participants=[
                ParticipantOut(user_id=p.user_id, username=p.username, joined_at=p.joined_at)
                for p in activity.participants
            ],
        )


class ActivityResponse(BaseModel):
    """Response model for activity create/update."""

    message: str
    activity: ActivityOut


class JoinResponse(BaseModel):
    """Response model for a successful join."""

    message: str
    activity_title: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
