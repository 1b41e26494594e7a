"""
API routes package.

Contains the account and activity routers.
"""

from src.api.routes.accounts import router as accounts_router
from src.api.routes.activities import router as activities_router

__all__ = ["accounts_router", "activities_router"]
