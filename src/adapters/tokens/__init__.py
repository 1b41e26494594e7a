"""Token adapters - Signed access token implementations."""

from .jwt_issuer import JwtTokenIssuer

__all__ = ["JwtTokenIssuer"]
