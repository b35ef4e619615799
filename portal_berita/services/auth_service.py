"""Authentication: registration, login, and bearer-token identity resolution."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from portal_berita.core.exceptions import AuthError, ServerError, ValidationError
from portal_berita.core.security import create_access_token, decode_token
from portal_berita.crud import crud_user
from portal_berita.models.user import User
from portal_berita.schemas.user import LoginRequest, LoginResponse, RegisterRequest

logger = logging.getLogger(__name__)

# Pesan sengaja generik: tidak membocorkan field mana yang salah
INVALID_LOGIN_MESSAGE = "Email, password, atau role salah"
INVALID_TOKEN_MESSAGE = "Unauthorized"


def uniqueness_errors(
    db: Session,
    *,
    username: Optional[str] = None,
    email: Optional[str] = None,
    exclude_id: Optional[int] = None,
) -> dict:
    """Field errors for username/email values already taken by another user."""
    errors = {}
    if username is not None:
        owner = crud_user.get_by_username(db, username)
        if owner is not None and owner.id_user != exclude_id:
            errors["username"] = ["Username sudah digunakan"]
    if email is not None:
        owner = crud_user.get_by_email(db, email)
        if owner is not None and owner.id_user != exclude_id:
            errors["email"] = ["Email sudah terdaftar"]
    return errors


class AuthService:
    def register(self, db: Session, *, user_in: RegisterRequest) -> User:
        """
        Register a new user.

        The insert runs in a single transaction. Unique indexes on username and
        email are the final arbiter, so a concurrent duplicate that slips past
        the pre-check still surfaces as a validation error.

        Raises:
            ValidationError: username/email already taken
            ServerError: any other persistence failure (rolled back)
        """
        errors = uniqueness_errors(db, username=user_in.username, email=user_in.email)
        if errors:
            raise ValidationError(errors)

        try:
            user = crud_user.create_user(db, user_in=user_in)
        except IntegrityError:
            logger.warning(f"[AUTH] Duplicate registration rejected by constraint: {user_in.username}")
            errors = uniqueness_errors(db, username=user_in.username, email=user_in.email)
            raise ValidationError(errors or {"email": ["Username atau email sudah terdaftar"]})
        except SQLAlchemyError:
            logger.exception("[AUTH] Registration failed")
            raise ServerError("Terjadi kesalahan saat registrasi")

        logger.info(f"[AUTH] Registered user id={user.id_user}, role={user.role}")
        return user

    def login(self, db: Session, *, login_in: LoginRequest) -> LoginResponse:
        """
        Exact (email, role) match plus password check.

        Raises:
            AuthError: on any mismatch, with the same message every time
        """
        user = crud_user.authenticate(
            db, email=login_in.email, password=login_in.password, role=login_in.role
        )
        if user is None:
            logger.warning(f"[AUTH] Failed login for email={login_in.email}, role={login_in.role}")
            raise AuthError(INVALID_LOGIN_MESSAGE)

        access_token = create_access_token(data={"sub": str(user.id_user), "role": user.role})
        logger.info(f"[AUTH] User logged in: id={user.id_user}, role={user.role}")

        return LoginResponse(
            access_token=access_token,
            role=user.role,
            membership=user.membership,
        )

    def resolve_identity(self, db: Session, token: Optional[str]) -> User:
        """
        Map a bearer token to exactly one user.

        Raises:
            AuthError: token missing, malformed, or pointing at a deleted user
        """
        if not token:
            raise AuthError(INVALID_TOKEN_MESSAGE)

        token_preview = token[:20] + "..." if len(token) > 20 else token
        payload = decode_token(token)
        subject = payload.get("sub")
        try:
            id_user = int(subject)
        except (TypeError, ValueError):
            logger.warning(f"[AUTH] Token without usable subject: {token_preview}")
            raise AuthError(INVALID_TOKEN_MESSAGE)

        user = crud_user.get(db, id_user)
        if user is None:
            logger.warning(f"[AUTH] User not found for token subject: {id_user}")
            raise AuthError(INVALID_TOKEN_MESSAGE)
        return user


# Singleton instance
auth_service = AuthService()
