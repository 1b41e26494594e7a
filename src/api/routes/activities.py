"""
Activity routes.

All endpoints require a bearer token. Creating and updating activities
is limited to admins; joining is limited to students.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_activity_service,
    get_current_user,
    require_admin,
    require_student,
)
from src.api.models import (
    ActivityOut,
    ActivityRequest,
    ActivityResponse,
    ErrorResponse,
    JoinResponse,
)
from src.domain.activities import ActivityService
from src.domain.ports import TokenClaims

router = APIRouter(
    prefix="/activities",
    tags=["activities"],
    responses={
        401: {"model": ErrorResponse, "description": "Token missing"},
        403: {"model": ErrorResponse, "description": "Token invalid or role not allowed"},
    },
)


@router.get(
    "",
    response_model=list[ActivityOut],
    summary="List activities",
    description="Available to any authenticated user.",
)
async def list_activities(
    _claims: TokenClaims = Depends(get_current_user),
    service: ActivityService = Depends(get_activity_service),
) -> list[ActivityOut]:
    return [ActivityOut.from_domain(a) for a in service.list_activities()]


@router.post(
    "",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Missing fields"}},
    summary="Create an activity",
    description="Admin only. Title, description and date are required.",
)
async def create_activity(
    request_data: ActivityRequest,
    _claims: TokenClaims = Depends(require_admin),
    service: ActivityService = Depends(get_activity_service),
) -> ActivityResponse:
    activity = service.create_activity(
        request_data.title, request_data.description, request_data.date
    )
    return ActivityResponse(
        message="Activity created", activity=ActivityOut.from_domain(activity)
    )


@router.put(
    "/{activity_id}",
    response_model=ActivityResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields"},
        404: {"model": ErrorResponse, "description": "Activity not found"},
    },
    summary="Update an activity",
    description="Admin only. Overwrites title, description and date; participants are kept.",
)
async def update_activity(
    activity_id: int,
    request_data: ActivityRequest,
    _claims: TokenClaims = Depends(require_admin),
    service: ActivityService = Depends(get_activity_service),
) -> ActivityResponse:
    activity = service.update_activity(
        activity_id, request_data.title, request_data.description, request_data.date
    )
    return ActivityResponse(
        message="Activity updated", activity=ActivityOut.from_domain(activity)
    )


@router.post(
    "/{activity_id}/join",
    response_model=JoinResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Already joined"},
        404: {"model": ErrorResponse, "description": "Activity not found"},
    },
    summary="Join an activity",
    description="Student (mahasiswa) only. A student can join each activity once.",
)
async def join_activity(
    activity_id: int,
    claims: TokenClaims = Depends(require_student),
    service: ActivityService = Depends(get_activity_service),
) -> JoinResponse:
    activity = service.join_activity(activity_id, claims)
    return JoinResponse(message="Successfully joined activity", activity_title=activity.title)
