"""
Account routes.

Defines the public registration and login endpoints.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_account_service
from src.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserSummary,
)
from src.domain.accounts import AccountService

router = APIRouter(tags=["accounts"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid role or missing fields"},
    },
    summary="Register a new user",
    description='Create an account with role "mahasiswa" (student) or "admin".',
)
async def register(
    request_data: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> RegisterResponse:
    """
    Register a new user.

    - **username**: Login name
    - **password**: Password (stored as a bcrypt hash)
    - **role**: "mahasiswa" or "admin"
    """
    user = service.register(request_data.username, request_data.password, request_data.role)
    return RegisterResponse(message="Registration successful", user=UserSummary.from_domain(user))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid username or password"},
    },
    summary="Log in and obtain an access token",
    description="Returns a signed bearer token valid for one hour.",
)
async def login(
    request_data: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    token = service.login(request_data.username, request_data.password)
    return LoginResponse(message="Login successful", token=token)
