"""Authentication endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_db
from portal_berita.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from portal_berita.services.auth_service import auth_service

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    responses={
        201: {"description": "User created"},
        422: {"description": "Validation failed or username/email already taken"},
        500: {"description": "Unexpected persistence failure"},
    },
)
def register(
    user_in: RegisterRequest,
    db: Session = Depends(get_db),
) -> RegisterResponse:
    """
    Register a new penulis or pembaca. Admins cannot self-register.

    Email is compared case-insensitively; username is case-sensitive.
    """
    user = auth_service.register(db, user_in=user_in)
    return RegisterResponse(data=UserResponse.model_validate(user))


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Login user",
    responses={
        200: {"description": "Bearer token issued"},
        401: {"description": "Email, password, or role mismatch"},
    },
)
def login(
    login_in: LoginRequest,
    db: Session = Depends(get_db),
) -> LoginResponse:
    """
    Login with email, password, and the role the account was registered with.

    The returned bearer token does not expire unless the deployment
    configures ACCESS_TOKEN_EXPIRE_DAYS.
    """
    return auth_service.login(db, login_in=login_in)
