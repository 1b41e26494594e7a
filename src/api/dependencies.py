"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting domain services
into routes, plus the bearer-token and role guards.
"""

from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapters.repository.memory import InMemoryActivityRepository, InMemoryUserRepository
from src.adapters.tokens.jwt_issuer import JwtTokenIssuer
from src.config.settings import get_settings
from src.domain.accounts import AccountService
from src.domain.activities import ActivityService
from src.domain.exceptions import PermissionDenied
from src.domain.ports import Role, TokenClaims


def get_user_repository(request: Request) -> InMemoryUserRepository:
    """
    Get user repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.users


def get_activity_repository(request: Request) -> InMemoryActivityRepository:
    """Get activity repository from app state."""
    return request.app.state.activities


def get_token_issuer() -> JwtTokenIssuer:
    """Build the token issuer from current settings."""
    settings = get_settings()
    return JwtTokenIssuer(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )


def get_account_service(request: Request) -> AccountService:
    """
    Create account service with injected dependencies.

    Wires together the user repository and token issuer for the domain service.
    """
    return AccountService(
        repository=get_user_repository(request),
        token_issuer=get_token_issuer(),
        bcrypt_cost=get_settings().bcrypt_cost,
    )


def get_activity_service(request: Request) -> ActivityService:
    """Create activity service backed by the activity repository."""
    return ActivityService(repository=get_activity_repository(request))


# Bearer security scheme for OpenAPI documentation.
# auto_error is off; get_current_user reports a missing token as 401.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    service: AccountService = Depends(get_account_service),
) -> TokenClaims:
    """
    Resolve the bearer token into the caller's claims.

    A missing Authorization header, or one with a non-Bearer scheme,
    yields 401. A token that fails verification raises InvalidToken,
    which the error handlers map to 403.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. Token not found.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return service.authenticate(credentials.credentials)


def require_role(role: Role) -> Callable[[TokenClaims], TokenClaims]:
    """
    Factory for dependencies that admit a single role.

    Args:
        role: Role the caller must hold

    Returns:
        FastAPI dependency returning the caller's claims
    """

    def role_guard(claims: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if claims.role != role:
            raise PermissionDenied(role.value)
        return claims

    return role_guard


require_admin = require_role(Role.ADMIN)
require_student = require_role(Role.STUDENT)
