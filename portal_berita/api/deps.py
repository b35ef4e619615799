"""FastAPI dependency injection functions for authentication and database access."""

import logging
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from portal_berita.core.exceptions import AuthError, ForbiddenError
from portal_berita.database import get_db
from portal_berita.models.user import User
from portal_berita.services.auth_service import auth_service

logger = logging.getLogger(__name__)

# Bearer token scheme; missing headers are handled here so the 401 body uses our envelope
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Dependency to get current authenticated user from the bearer token.

    Raises:
        AuthError: 401 if the token is absent, invalid, or its user is gone
    """
    token = credentials.credentials if credentials else None
    return auth_service.resolve_identity(db, token)


def get_optional_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """
    Dependency to optionally get current authenticated user.
    Returns None if no valid token provided.

    Useful for endpoints that allow both authenticated and unauthenticated access.
    """
    if credentials is None:
        return None

    try:
        return auth_service.resolve_identity(db, credentials.credentials)
    except AuthError:
        return None


def require_role(*allowed_roles: str) -> Callable:
    """
    Factory function to create role-based access control dependency.

    Raises:
        ForbiddenError: 403 if user role not in allowed_roles

    Example:
        @router.delete("/kategori/{id_kategori}")
        def delete_kategori(current_user: User = Depends(require_role("admin"))):
            ...
    """
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            logger.warning(
                f"[AUTH] Role {current_user.role} of user={current_user.id_user} "
                f"not in {allowed_roles}"
            )
            raise ForbiddenError(
                f"Akses ditolak. Role yang diizinkan: {', '.join(allowed_roles)}"
            )
        return current_user

    return role_checker


__all__ = [
    "bearer_scheme",
    "get_db",
    "get_current_user",
    "get_optional_current_user",
    "require_role",
]
