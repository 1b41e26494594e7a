"""
Account domain service - Registration, login and token authentication.

Passwords are stored as bcrypt hashes. Login compares against a dummy hash
when the username is unknown so that both failure paths run bcrypt and take
comparable time.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

import bcrypt

from .exceptions import InvalidCredentials
from .ports import Role, TokenClaims, TokenIssuer, User, UserRepository

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash(cost: int) -> bytes:
    """Hash checked when the user is missing; same cost as real hashes."""
    return bcrypt.hashpw(b"dummy_password_for_timing_safety", bcrypt.gensalt(rounds=cost))


@dataclass
class AccountService:
    """
    Domain service for user accounts.

    Orchestrates role validation, password hashing, credential checks
    and token issuance.
    """

    repository: UserRepository
    token_issuer: TokenIssuer
    bcrypt_cost: int = 10

    def register(self, username: str, password: str, role: str) -> User:
        """
        Register a new user.

        Args:
            username: Login name (uniqueness is not enforced)
            password: Plaintext password (will be hashed)
            role: "mahasiswa" or "admin"

        Returns:
            The stored user

        Raises:
            InvalidRole: If role is not a known role
        """
        parsed_role = Role.parse(role)
        password_hash = self._hash_password(password)
        user = self.repository.add(username, password_hash, parsed_role)
        logger.info("Registered user id=%s username=%s role=%s", user.id, username, parsed_role.value)
        return user

    def login(self, username: str, password: str) -> str:
        """
        Check credentials and issue an access token.

        Returns:
            Signed token carrying the user's id, username and role

        Raises:
            InvalidCredentials: If the user is unknown or the password is wrong
        """
        user = self.repository.find_by_username(username)
        if user is not None:
            stored_hash = user.password_hash.encode()
        else:
            stored_hash = _dummy_hash(self.bcrypt_cost)
        password_matches = bcrypt.checkpw(password.encode(), stored_hash)

        if user is None or not password_matches:
            logger.warning("Failed login for username=%s", username)
            raise InvalidCredentials(username)

        logger.info("User id=%s logged in", user.id)
        return self.token_issuer.issue(
            TokenClaims(user_id=user.id, username=user.username, role=user.role)
        )

    def authenticate(self, token: str) -> TokenClaims:
        """
        Resolve a bearer token into its claims.

        Raises:
            InvalidToken: If the token is forged, malformed or expired
        """
        return self.token_issuer.verify(token)

    def _hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
