"""
JWT token adapter - Implements TokenIssuer protocol with PyJWT.

Tokens are HMAC-signed and carry the user's id, username and role
alongside the standard iat/exp claims.
"""

import logging
from datetime import UTC, datetime, timedelta

import jwt

from src.domain.exceptions import InvalidRole, InvalidToken
from src.domain.ports import Role, TokenClaims

logger = logging.getLogger(__name__)


class JwtTokenIssuer:
    """
    Implements TokenIssuer protocol via PyJWT.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_seconds: int = 3600) -> None:
        """
        Args:
            secret: Shared HMAC secret
            algorithm: JWT signing algorithm
            ttl_seconds: Lifetime of issued tokens
        """
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)

    def issue(self, claims: TokenClaims) -> str:
        now = datetime.now(UTC)
        payload = {
            "id": claims.user_id,
            "username": claims.username,
            "role": claims.role.value,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode a token and rebuild its claims.

        Raises:
            InvalidToken: On bad signature, expiry, malformed token
                or missing/unknown claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "id", "username", "role"]},
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired token")
            raise InvalidToken("Token has expired") from None
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected invalid token: %s", exc)
            raise InvalidToken("Invalid token") from None

        try:
            return TokenClaims(
                user_id=int(payload["id"]),
                username=str(payload["username"]),
                role=Role.parse(payload["role"]),
            )
        except (InvalidRole, TypeError, ValueError):
            logger.warning("Rejected token with malformed claims")
            raise InvalidToken("Invalid token payload") from None
